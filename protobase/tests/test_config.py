import pytest

import protobase
from protobase import config, registry
from protobase.core import Template


def test_get(restore_config):
    assert config.get('root_name') == 'Base'
    assert config.get('nothing', 1) == 1


def test_load_config(tmp_path, restore_config):
    path = tmp_path / "protobase.yml"
    path.write_text(
        "root_name: Object\n"
        "anonymous_name: anon\n"
        "extra:\n"
        "  a: 1\n"
    )
    protobase.load_config(str(path))

    assert config.anonymous_name == 'anon'
    assert config.extra.a == 1

    registry.teardown()
    r = registry.root()
    assert r.name == 'Object'
    assert r.extend().name == 'anon'
    registry.teardown()


def test_load_empty_config(tmp_path, restore_config):
    path = tmp_path / "empty.yml"
    path.write_text("")
    protobase.load_config(str(path))
    assert config.root_name == 'Base'


def test_check_types(restore_config):
    class FakeBlueprint:
        name = 'fake'
        prototype = Template(None)

    config.check_types = False
    # without checks, anything that quacks like a blueprint can be extended
    x = protobase.extend(FakeBlueprint(), 'X')
    assert x.prototype._parent is FakeBlueprint.prototype

    config.check_types = True
    with pytest.raises(TypeError):
        protobase.extend(FakeBlueprint(), 'X')
