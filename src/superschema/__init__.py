from .checkers import MISSING, TypeRegistry, kind_of
from .engine import DEFAULT_NAME, Validator
from .errors import ConfigError, PatternError, SuperSchemaError
from .integration import check, default_validator, extend, set_default_validator
from .patterns import StringPattern, parse_string_pattern

__version__ = "0.3.0"

__all__ = [
    "DEFAULT_NAME",
    "MISSING",
    "ConfigError",
    "PatternError",
    "StringPattern",
    "SuperSchemaError",
    "TypeRegistry",
    "Validator",
    "check",
    "default_validator",
    "extend",
    "kind_of",
    "parse_string_pattern",
    "set_default_validator",
]
