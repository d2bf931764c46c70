"""Core datastructures for protobase.

A blueprint owns a template (its `prototype`) and a link to its parent
blueprint. Templates are method tables chained through their parent links
and instances delegate every lookup they can't satisfy to the template
chain of the blueprint that created them.

    >>> a = Blueprint('A')
    >>> a.prototype.greet = lambda self: 'hello ' + self.who
    >>> b = Blueprint('B', a)
    >>> x = Instance(b)
    >>> x.who = 'world'
    >>> x.greet()
    'hello world'
    >>> x.base
    <blueprint: 'B'>
"""
import types

import simplejson
import web


class ProtobaseException(Exception):
    def __init__(self, **kw):
        kw.setdefault('error', 'unknown')
        self.d = kw
        Exception.__init__(self)

    def __str__(self):
        return simplejson.dumps(self.d)

    def dict(self):
        return dict(self.d)


class NoParentBlueprint(ProtobaseException):
    """Raised when a super call is made from the top of the chain.

    >>> e = NoParentBlueprint(blueprint='Base')
    >>> e.d['message']
    'Base._super not found'
    >>> e.dict()['error']
    'no_parent_blueprint'
    """

    def __init__(self, blueprint, **kw):
        kw.setdefault('message', '%s._super not found' % blueprint)
        ProtobaseException.__init__(
            self, error='no_parent_blueprint', blueprint=blueprint, **kw
        )


class MethodNotFound(ProtobaseException):
    def __init__(self, blueprint, method, **kw):
        kw.setdefault(
            'message',
            '%s._super.prototype.%s not found or not a function' % (blueprint, method),
        )
        ProtobaseException.__init__(
            self, error='method_not_found', blueprint=blueprint, method=method, **kw
        )


def bind(value, receiver):
    """Binds plain functions to receiver. Everything else is returned as is."""
    if isinstance(value, types.FunctionType):
        return types.MethodType(value, receiver)
    else:
        return value


class Template:
    """Method table shared by all the instances of a blueprint.

    Reads fall back to the parent template, writes and deletes only ever
    touch the table of this template.

        >>> t = Template(None)
        >>> t.x = 1
        >>> child = Template(None, t)
        >>> child.x
        1
        >>> child.x = 2
        >>> child.x, t.x
        (2, 1)
        >>> del child.x
        >>> child.x
        1
        >>> 'x' in child, 'y' in child
        (True, False)
    """

    __slots__ = ['_owner', '_parent', '_d']

    def __init__(self, owner, parent=None):
        object.__setattr__(self, '_owner', owner)
        object.__setattr__(self, '_parent', parent)
        object.__setattr__(self, '_d', {})

    def _chain(self):
        t = self
        while t is not None:
            yield t
            t = t._parent

    def _lookup(self, name):
        for t in self._chain():
            if name in t._d:
                return t._d[name]
        raise KeyError(name)

    def __getattr__(self, name):
        if name in Template.__slots__:
            raise AttributeError(name)
        if name in self._d:
            return self._d[name]
        if name.startswith('__'):
            raise AttributeError(name)
        try:
            return self._lookup(name)
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        if name in Template.__slots__:
            raise AttributeError("can't set attribute %r" % name)
        self._d[name] = value

    def __delattr__(self, name):
        try:
            del self._d[name]
        except KeyError:
            raise AttributeError(name)

    def __contains__(self, name):
        return any(name in t._d for t in self._chain())

    def __repr__(self):
        name = self._owner.name if self._owner is not None else None
        return "<prototype: %s>" % repr(name)


class Blueprint:
    """Class-like object that can be extended and instantiated.

    Attributes that are not found on a blueprint are looked up on its parent
    blueprint. Functions are bound to the blueprint they were accessed from.

        >>> a = Blueprint('A')
        >>> a.describe = lambda cls: 'blueprint ' + cls.name
        >>> b = Blueprint('B', a)
        >>> b.describe()
        'blueprint B'
        >>> b.parent is a, b.prototype._parent is a.prototype
        (True, True)
    """

    __slots__ = ['_name', '_super', '_prototype', '_d']

    def __init__(self, name, parent=None):
        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_super', parent)
        object.__setattr__(
            self, '_prototype', Template(self, parent and parent.prototype)
        )
        object.__setattr__(self, '_d', {})

    @property
    def name(self):
        return self._name

    @property
    def parent(self):
        return self._super

    @property
    def prototype(self):
        return self._prototype

    def extend(self, name=None):
        from protobase import utils

        return utils.extend(self, name)

    def create(self, *args, **kw):
        from protobase import utils

        return utils.create(self, *args, **kw)

    def like(self, blueprint):
        from protobase import utils

        return utils.like(self, blueprint)

    def ancestors(self):
        from protobase import utils

        return utils.ancestors(self)

    def __getattr__(self, name):
        if name in Blueprint.__slots__:
            raise AttributeError(name)
        if name in self._d:
            return bind(self._d[name], self)
        if name.startswith('__'):
            raise AttributeError(name)

        b = self._super
        while b is not None:
            if name in b._d:
                return bind(b._d[name], self)
            b = b._super
        raise AttributeError(name)

    def __setattr__(self, name, value):
        if name in READ_ONLY_BLUEPRINT_ATTRS:
            raise AttributeError("can't set attribute %r" % name)
        self._d[name] = value

    def __delattr__(self, name):
        try:
            del self._d[name]
        except KeyError:
            raise AttributeError(name)

    def __repr__(self):
        return "<blueprint: %s>" % repr(self._name)


class Instance:
    """Object created from a blueprint.

    Own fields live in a storage of their own. `base` and `constructor` are
    not fields: they are read-only and never show up in `own_fields` or
    get copied by `mixin`.
    """

    __slots__ = ['_base', '_fields']

    def __init__(self, base):
        object.__setattr__(self, '_base', base)
        object.__setattr__(self, '_fields', web.storage())

    @property
    def base(self):
        return self._base

    @property
    def constructor(self):
        return self._base.create

    def __getattr__(self, name):
        if name in Instance.__slots__:
            raise AttributeError(name)
        if name in self._fields:
            return self._fields[name]
        if name.startswith('__'):
            raise AttributeError(name)

        try:
            value = self._base.prototype._lookup(name)
        except KeyError:
            raise AttributeError(name)
        return bind(value, self)

    def __setattr__(self, name, value):
        if name in READ_ONLY_INSTANCE_ATTRS:
            raise AttributeError("can't set attribute %r" % name)
        self._fields[name] = value

    def __delattr__(self, name):
        try:
            del self._fields[name]
        except KeyError:
            raise AttributeError(name)

    def __repr__(self):
        return "<%s %s>" % (self._base.name, repr(dict(self._fields)))


READ_ONLY_BLUEPRINT_ATTRS = [
    'name',
    'parent',
    'prototype',
    'extend',
    'create',
    'like',
    'ancestors',
] + Blueprint.__slots__
READ_ONLY_INSTANCE_ATTRS = ['base', 'constructor'] + Instance.__slots__


def read_only_attrs(obj):
    """Returns the names that can't be assigned on obj."""
    if isinstance(obj, Instance):
        return READ_ONLY_INSTANCE_ATTRS
    elif isinstance(obj, Blueprint):
        return READ_ONLY_BLUEPRINT_ATTRS
    elif isinstance(obj, Template):
        return Template.__slots__
    else:
        return []
