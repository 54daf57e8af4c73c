from __future__ import annotations
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .checkers import MISSING, TypeRegistry, kind_of
from .errors import ConfigError, PatternError
from .patterns import (
    ALLOWED_VALUES_KEY,
    ELEMENTS_KEY,
    NULLABLE_KEY,
    RESERVED_KEYS,
    REQUIRED_KEY,
    TYPE_KEY,
    VALUE_KEY,
    StringPattern,
    parse_string_pattern,
)

logger = logging.getLogger(__name__)

DEFAULT_NAME = "configObject"

@dataclass(frozen=True)
class Validator:
    """Checks values against string and object patterns.

    A validator never changes after construction. Registering a reactive
    library produces a new validator with a new registry.
    """
    registry: TypeRegistry = field(default_factory=TypeRegistry)

    def check(self, value: Any, pattern: Any, name: str | None = None) -> None:
        name = name or DEFAULT_NAME
        logger.debug("Checking %s against %r", name, pattern)
        self.verify(pattern, name)
        self._dispatch(value, pattern, name)

    def verify(self, pattern: Any, name: str | None = None) -> None:
        """Raise ConfigError for a malformed pattern, without looking at any value."""
        name = name or DEFAULT_NAME
        if isinstance(pattern, str):
            parse_string_pattern(pattern, self.registry)
        elif isinstance(pattern, Mapping):
            self._verify_object(pattern, name)
        elif not isinstance(pattern, StringPattern):
            raise ConfigError(f"Invalid pattern: {pattern}", name)

    def with_observable_lib(self, lib: Any) -> Validator:
        return Validator(self.registry.with_observable_lib(lib))

    def _dispatch(self, value: Any, pattern: Any, name: str) -> None:
        if isinstance(pattern, Mapping):
            self._check_object(value, pattern, name)
        elif isinstance(pattern, str):
            self._check_string(value, parse_string_pattern(pattern, self.registry), name)
        elif isinstance(pattern, StringPattern):
            self._check_string(value, pattern, name)
        else:
            raise ConfigError(f"Invalid pattern: {pattern}", name)

    def _verify_object(self, pattern: Mapping[str, Any], name: str) -> None:
        type_name = self._resolve_type(pattern, name)
        if ELEMENTS_KEY in pattern:
            self.verify(pattern[ELEMENTS_KEY], f"{name}[]")
        if pattern.get(VALUE_KEY) is not None:
            self.verify(pattern[VALUE_KEY], f"{name}()")
        if type_name != "object":
            return
        for prop, sub_pattern in pattern.items():
            if prop in RESERVED_KEYS:
                continue
            if not isinstance(prop, str):
                raise ConfigError(f"Invalid pattern: field key {prop!r} is not a string!", name)
            self.verify(sub_pattern, f"{name}.{prop}")

    def _resolve_type(self, pattern: Mapping[str, Any], name: str) -> str:
        type_name = self.registry.require(pattern.get(TYPE_KEY) or "object", name)
        allowed_values = pattern.get(ALLOWED_VALUES_KEY, MISSING)
        if allowed_values is not MISSING and not isinstance(allowed_values, (list, tuple)):
            raise ConfigError("Invalid pattern: the __allowedValues property always has to be an array!", name)
        return type_name

    def _check_string(self, value: Any, pattern: StringPattern, name: str) -> None:
        if value is MISSING:
            if pattern.optional:
                return
            raise PatternError(f"{name} is mandatory!", name)
        if value is None:
            if pattern.nullable:
                return
            raise PatternError(f"{name} shouldn't be null!", name)
        self.registry.check_type(value, pattern.type_name, name)
        sub = pattern.sub_pattern
        if sub is None:
            return
        if pattern.type_name == "array":
            for index, element in enumerate(value):
                self._check_string(element, sub, f"{name}[{index}]")
        else:
            self._check_string(value(), sub, f"{name}()")

    def _check_object(self, value: Any, pattern: Mapping[str, Any], name: str) -> None:
        type_name = self._resolve_type(pattern, name)
        allowed_values = pattern.get(ALLOWED_VALUES_KEY, MISSING)

        if value is MISSING:
            if pattern.get(REQUIRED_KEY) is not False:
                raise PatternError(f"{name} is mandatory!", name)
            return
        if value is None:
            if pattern.get(NULLABLE_KEY) is not True:
                raise PatternError(f"{name} shouldn't be null!", name)
            return
        if allowed_values is not MISSING:
            self._check_allowed_values(value, allowed_values, name)
            return

        self.registry.check_type(value, type_name, name)
        if type_name == "array":
            if ELEMENTS_KEY in pattern:
                for index, element in enumerate(value):
                    self._dispatch(element, pattern[ELEMENTS_KEY], f"{name}[{index}]")
        elif type_name == "object":
            for prop, sub_pattern in pattern.items():
                if prop in RESERVED_KEYS:
                    continue
                if not isinstance(prop, str):
                    raise ConfigError(f"Invalid pattern: field key {prop!r} is not a string!", name)
                self._check_shorthand(value, prop, sub_pattern, name)
        elif type_name == "observable":
            if pattern.get(VALUE_KEY) is not None:
                self._dispatch(value(), pattern[VALUE_KEY], f"{name}()")

    def _check_allowed_values(self, value: Any, allowed_values: Any, name: str) -> None:
        kind = kind_of(value)
        for allowed in allowed_values:
            if kind_of(allowed) != kind:
                continue
            # Containers match by identity only.
            if allowed is value or (kind not in ("array", "object") and allowed == value):
                return
        raise PatternError(f"The value of {name} is not among the allowed ones!", name)

    def _check_shorthand(self, value: Any, prop: str, pattern: Any, name: str) -> None:
        current = value
        for key in prop.split("."):
            if not isinstance(current, Mapping):
                raise PatternError(f"{name} should have object type!", name)
            current = current.get(key, MISSING)
            name = f"{name}.{key}"
        self._dispatch(current, pattern, name)
