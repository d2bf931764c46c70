"""
protobase configuration.
"""


def get(name, default=None):
    return globals().get(name, default)


# name of the root blueprint. Only used when the root is created.
root_name = "Base"

# name given to blueprints extended without one
anonymous_name = "<anonymous>"

# raise TypeError when extend, create or like is given something that is
# not a blueprint
check_types = True
