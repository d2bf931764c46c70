"""Process-wide root blueprint.

The root is created the first time it is asked for, or explicitly with
`setup()`, and lives until `teardown()` is called.

    >>> teardown()
    >>> r = root()
    >>> r is root(), r.name, r.parent
    (True, 'Base', None)
    >>> sorted(r.prototype._d)
    ['call_super', 'init', 'like', 'mixin']
"""
import logging

from protobase import config
from protobase.core import Blueprint
from protobase.utils import call_super as _call_super
from protobase.utils import like as _like
from protobase.utils import mixin as _mixin

logger = logging.getLogger("protobase.registry")

_root = None


def init(self, fields=None):
    """Default initializer. Copies the given fields into the new object."""
    if fields is not None:
        self.mixin(fields)


def mixin(self, fields):
    _mixin(self, fields)


def like(self, blueprint):
    return _like(self, blueprint)


def call_super(self, method, *args, **kw):
    return _call_super(self, method, *args, **kw)


root_methods = dict(init=init, mixin=mixin, like=like, call_super=call_super)


def setup():
    """Creates the root blueprint unless it already exists and returns it."""
    global _root
    if _root is None:
        _root = Blueprint(config.root_name)
        _mixin(_root.prototype, root_methods)
        logger.debug("created root blueprint %s", _root.name)
    return _root


def root():
    if _root is None:
        return setup()
    return _root


def teardown():
    """Forgets the root blueprint.

    Blueprints and instances created earlier keep working, but the next
    call to `root()` creates a new, unrelated root.
    """
    global _root
    if _root is not None:
        logger.debug("discarding root blueprint %s", _root.name)
    _root = None
