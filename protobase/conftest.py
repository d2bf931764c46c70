import pytest

from protobase import config, registry


@pytest.fixture
def root():
    """Returns a fresh root blueprint, discarded after the test."""
    registry.teardown()
    yield registry.setup()
    registry.teardown()


@pytest.fixture
def restore_config():
    saved = {k: v for k, v in vars(config).items() if not k.startswith('_')}
    yield config
    for k in list(vars(config)):
        if not k.startswith('_') and k not in saved:
            delattr(config, k)
    for k, v in saved.items():
        setattr(config, k, v)
