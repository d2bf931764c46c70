"""Operations on blueprints and instances.

    >>> from protobase import registry
    >>> Person = registry.root().extend('Person')
    >>> Person.prototype.speak = lambda self, words: '%s says %s' % (self.name, words)
    >>> Canadian = Person.extend('Canadian')
    >>> Canadian.prototype.speak = lambda self, words: call_super(self, 'speak', words + ', eh')
    >>> c = Canadian.create({'name': 'sjs'})
    >>> c.speak('hello')
    'sjs says hello, eh'
    >>> like(c, Person), like(Person.create(), Canadian)
    (True, False)
"""
import logging
from collections.abc import Mapping

import web

from protobase import config
from protobase.core import (
    Blueprint,
    Instance,
    MethodNotFound,
    NoParentBlueprint,
    Template,
    bind,
    read_only_attrs,
)

logger = logging.getLogger("protobase.utils")


def is_blueprint(obj):
    return isinstance(obj, Blueprint)


def is_instance(obj):
    return isinstance(obj, Instance)


def _check_blueprint(obj, action):
    if config.check_types and not is_blueprint(obj):
        raise TypeError("can't %s %r: not a blueprint" % (action, obj))


def extend(parent, name=None):
    """Creates a new blueprint that inherits from parent.

        >>> from protobase import registry
        >>> registry.root().extend('Person')
        <blueprint: 'Person'>
        >>> registry.root().extend()
        <blueprint: '<anonymous>'>
        >>> registry.root().extend(b'Bytes').name
        'Bytes'
    """
    _check_blueprint(parent, "extend")

    if isinstance(name, bytes):
        name = name.decode('utf-8')

    blueprint = Blueprint(name or config.anonymous_name, parent)
    logger.debug("extend %s from %s", blueprint.name, parent.name)
    return blueprint


def create(blueprint, *args, **kw):
    """Creates a new instance of blueprint and initializes it by calling
    its `init` method with the given arguments.
    """
    _check_blueprint(blueprint, "create an instance of")

    obj = Instance(blueprint)
    obj.init(*args, **kw)
    return obj


def ancestors(blueprint):
    """Returns an iterator over blueprint and all its ancestors, nearest first.

        >>> from protobase import registry
        >>> a = registry.root().extend('A')
        >>> [b.name for b in ancestors(a.extend('B'))]
        ['B', 'A', 'Base']
    """
    b = blueprint
    while b is not None:
        yield b
        b = b.parent


def like(obj, blueprint):
    """Tells whether obj inherits from the given blueprint.

    An instance is like its own blueprint and all the ancestors of it. A
    blueprint is like itself and its ancestors. Nothing else is like
    anything.

        >>> from protobase import registry
        >>> a = registry.root().extend('A')
        >>> b = a.extend('B')
        >>> like(b.create(), a), like(b, a), like(a, b)
        (True, True, False)
        >>> like({}, a)
        False
    """
    _check_blueprint(blueprint, "compare with")

    if is_instance(obj):
        template = obj.base.prototype
    elif is_blueprint(obj):
        template = obj.prototype
    else:
        return False

    return any(t is blueprint.prototype for t in template._chain())


def own_fields(obj):
    """Returns the own keys and values of obj as a storage object.

    Instances contribute their fields, templates and blueprints their own
    table, mappings their items and any other object its `vars()`.

        >>> own_fields({'a': 1})
        <Storage {'a': 1}>
    """
    if is_instance(obj):
        return web.storage(obj._fields)
    elif isinstance(obj, Template):
        return web.storage(obj._d)
    elif is_blueprint(obj):
        return web.storage(obj._d)
    elif isinstance(obj, Mapping):
        return web.storage(obj)
    else:
        return web.storage(vars(obj))


def mixin(target, fields):
    """Copies the own fields of `fields` into target.

    Keys are converted to strings. Keys naming attributes that are read-only
    on target, like `base` on instances, are skipped.

        >>> from protobase import registry
        >>> x = registry.root().create()
        >>> mixin(x, {'a': 1, 'b': 2})
        >>> x.a, x.b
        (1, 2)
        >>> mixin(x, {'base': None, 1: 'one'})
        >>> x.base is registry.root(), getattr(x, '1')
        (True, 'one')
    """
    fields = own_fields(fields)
    if len(fields) == 0:
        return

    read_only = read_only_attrs(target)
    for k, v in fields.items():
        k = str(k)
        if k in read_only:
            logger.debug("mixin: skipping read-only attribute %s", k)
            continue
        setattr(target, k, v)


def call_super(obj, method, *args, **kw):
    """Calls the implementation of method from the parent blueprint of the
    blueprint obj was created from, with obj as the receiver.
    """
    base = obj.base
    sup = base.parent
    if sup is None:
        raise NoParentBlueprint(blueprint=base.name)

    try:
        f = sup.prototype._lookup(method)
    except KeyError:
        f = None

    if not callable(f):
        raise MethodNotFound(blueprint=base.name, method=method)

    return bind(f, obj)(*args, **kw)
