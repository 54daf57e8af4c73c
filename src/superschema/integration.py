"""Hook for registering the reactive-value library used by ``observable`` checks.

The library is anything exposing ``is_observable(value) -> bool``. Observable
values themselves are invoked with no arguments to read their contents::

    import superschema
    superschema.extend({"knockout": ko})
    superschema.check(model.name, "observable string", "model.name")
"""
from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Any

from .engine import Validator
from .errors import ConfigError

logger = logging.getLogger(__name__)

LIBRARY_KEYS = ("knockout", "ko")

_default_validator = Validator()

def default_validator() -> Validator:
    return _default_validator

def set_default_validator(validator: Validator) -> Validator:
    """Swap the process-wide validator and return the previous one."""
    global _default_validator
    previous, _default_validator = _default_validator, validator
    return previous

def extend(config: Any) -> None:
    if not isinstance(config, Mapping):
        raise ConfigError("'config' has to be an object!")
    lib = None
    for key in LIBRARY_KEYS:
        lib = config.get(key)
        if lib is not None:
            break
    if lib is None:
        raise ConfigError("superschema.extend called without any known parameters!")
    if not callable(getattr(lib, "is_observable", None)):
        raise ConfigError("Invalid 'knockout' parameter given!")
    set_default_validator(_default_validator.with_observable_lib(lib))
    logger.info("Registered reactive library %r for observable checks", lib)

def check(value: Any, pattern: Any, name: str | None = None) -> None:
    _default_validator.check(value, pattern, name)
