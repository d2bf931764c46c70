import protobase
from protobase import registry


def setup_module(mod):
    registry.teardown()


def teardown_module(mod):
    registry.teardown()


class TestRegistry:
    def setup_method(self, method):
        registry.teardown()

    def test_root_is_lazy_singleton(self):
        assert registry._root is None
        r = registry.root()
        assert registry.root() is r
        assert registry.setup() is r

    def test_root(self):
        r = registry.root()
        assert r.name == 'Base'
        assert r.parent is None
        for name in ['init', 'mixin', 'like', 'call_super']:
            assert name in r.prototype

    def test_teardown(self):
        r = registry.root()
        x = r.extend('Person').create({'n': 1})
        registry.teardown()
        assert registry._root is None
        assert registry.root() is not r
        # existing objects keep working
        assert x.n == 1
        assert x.like(r)

    def test_package_api(self):
        assert protobase.root is registry.root
        r = protobase.root()
        p = protobase.extend(r, 'P')
        assert protobase.like(protobase.create(p), r)


class TestScenarios:
    def setup_method(self, method):
        registry.teardown()
        self.root = registry.root()

    def test_create_from_root(self):
        x = self.root.create()
        assert protobase.like(x, self.root)

    def test_two_levels(self):
        p = self.root.extend('P')
        c = p.extend('C')
        i = c.create({'n': 1})
        assert i.n == 1
        assert i.like(c) and i.like(p) and i.like(self.root)

    def test_super_call(self):
        p = self.root.extend('P')
        p.prototype.foo = lambda self, x: x
        c = p.extend('C')
        c.prototype.foo = lambda self, x: protobase.call_super(self, 'foo', x)
        assert c.create().foo(42) == 42

    def test_super_from_root(self):
        try:
            protobase.call_super(self.root.create(), 'init')
        except protobase.NoParentBlueprint as e:
            assert e.d['blueprint'] == 'Base'
        else:
            assert False, "expected NoParentBlueprint"

    def test_super_missing_method(self):
        i = self.root.extend('P').create()
        try:
            i.call_super('nonexistentMethod')
        except protobase.MethodNotFound as e:
            assert e.d['method'] == 'nonexistentMethod'
        else:
            assert False, "expected MethodNotFound"
