from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .checkers import TypeRegistry
from .errors import ConfigError

OPTIONAL = "optional"
NULLABLE = "nullable"
NESTING_TYPES = ("array", "observable")

TYPE_KEY = "__type"
REQUIRED_KEY = "__required"
NULLABLE_KEY = "__nullable"
ELEMENTS_KEY = "__elements"
ALLOWED_VALUES_KEY = "__allowedValues"
VALUE_KEY = "__value"
RESERVED_KEYS = frozenset({TYPE_KEY, REQUIRED_KEY, NULLABLE_KEY, ELEMENTS_KEY, ALLOWED_VALUES_KEY, VALUE_KEY})

@dataclass(frozen=True)
class StringPattern:
    """One level of a string pattern such as ``"optional array nullable string"``.

    ``sub_pattern`` only ever appears under the ``array`` and ``observable``
    types and describes the elements or the wrapped contents.
    """
    type_name: str
    optional: bool = False
    nullable: bool = False
    sub_pattern: Optional[StringPattern] = None
    source: str = ""

def parse_string_pattern(text: str, registry: TypeRegistry | None = None) -> StringPattern:
    registry = registry or TypeRegistry()
    return _parse_tokens(text.split(), text, registry)

def _parse_tokens(tokens: list[str], source: str, registry: TypeRegistry) -> StringPattern:
    optional = nullable = False
    pos = 0
    while pos < len(tokens) and tokens[pos] in (OPTIONAL, NULLABLE):
        if tokens[pos] == OPTIONAL:
            optional = True
        else:
            nullable = True
        pos += 1
    if pos == len(tokens):
        raise ConfigError(f"Invalid pattern: {source}")
    type_name = registry.require(tokens[pos])
    rest = tokens[pos + 1:]
    sub_pattern = None
    if rest:
        if type_name not in NESTING_TYPES:
            raise ConfigError(f"Invalid pattern: {source}")
        sub_pattern = _parse_tokens(rest, " ".join(rest), registry)
    return StringPattern(type_name, optional, nullable, sub_pattern, " ".join(tokens[pos:]))
