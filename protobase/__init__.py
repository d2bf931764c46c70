"""protobase: blueprints, instances and super calls on top of prototype delegation."""

__version__ = "0.1dev"

import logging

import web

from protobase import config
from protobase.core import (  # noqa: F401
    Blueprint,
    Instance,
    MethodNotFound,
    NoParentBlueprint,
    ProtobaseException,
    Template,
)
from protobase.registry import root, setup, teardown  # noqa: F401
from protobase.utils import (  # noqa: F401
    ancestors,
    call_super,
    create,
    extend,
    is_blueprint,
    is_instance,
    like,
    mixin,
    own_fields,
)

logger = logging.getLogger("protobase")


def storify(d):
    if isinstance(d, dict):
        return web.storage((k, storify(v)) for k, v in d.items())
    elif isinstance(d, list):
        return [storify(x) for x in d]
    else:
        return d


def load_config(config_file):
    """Updates protobase.config from a YAML file.

    Settings that only matter when the root blueprint is created, like
    `root_name`, take effect after the next `teardown()`.
    """
    import yaml

    with open(config_file) as f:
        runtime_config = yaml.safe_load(f) or {}

    for k, v in runtime_config.items():
        setattr(config, k, storify(v))
    logger.debug("loaded config from %s: %s", config_file, sorted(runtime_config))
