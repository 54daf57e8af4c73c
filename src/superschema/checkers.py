from __future__ import annotations
import datetime
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Callable, Literal

from .errors import ConfigError, PatternError

Kind = Literal["missing", "null", "boolean", "number", "string", "array", "object", "function", "date", "other"]
Checker = Callable[[Any, str], None]

class _MissingType:
    """Marks a value that is absent, as opposed to one that is None."""
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

MISSING: Any = _MissingType()

def kind_of(value: Any) -> Kind:
    if value is MISSING: return "missing"
    if value is None: return "null"
    if isinstance(value, bool): return "boolean"
    if isinstance(value, (int, float)): return "number"
    if isinstance(value, str): return "string"
    if isinstance(value, (list, tuple)): return "array"
    if isinstance(value, Mapping): return "object"
    if isinstance(value, datetime.date): return "date"
    if callable(value): return "function"
    return "other"

def simple_checker(type_name: str) -> Checker:
    def check(value: Any, path: str) -> None:
        if kind_of(value) != type_name:
            raise PatternError(f"{path} should have {type_name} type!", path)
    check.__name__ = f"check_{type_name}"
    return check

def check_function(value: Any, path: str) -> None:
    # Classes and other callables count, so this is not a kind_of comparison.
    if not callable(value):
        raise PatternError(f"{path} should have function type!", path)

def check_array(value: Any, path: str) -> None:
    if not isinstance(value, (list, tuple)):
        raise PatternError(f"{path} has to be an array!", path)

def check_date(value: Any, path: str) -> None:
    if not isinstance(value, datetime.date):
        raise PatternError(f"{path} has to be a date object!", path)

def check_observable_unavailable(value: Any, path: str) -> None:
    raise ConfigError("Observable checking is not possible because no knockout instance is given!", path)

def observable_checker(lib: Any) -> Checker:
    def check_observable(value: Any, path: str) -> None:
        if not lib.is_observable(value):
            raise PatternError(f"{path} has to be an observable!", path)
    return check_observable

DEFAULT_CHECKERS: Mapping[str, Checker] = MappingProxyType({
    "array": check_array,
    "boolean": simple_checker("boolean"),
    "date": check_date,
    "function": check_function,
    "number": simple_checker("number"),
    "object": simple_checker("object"),
    "observable": check_observable_unavailable,
    "string": simple_checker("string"),
})

@dataclass(frozen=True)
class TypeRegistry:
    checkers: Mapping[str, Checker] = field(default_factory=lambda: DEFAULT_CHECKERS)
    observable_lib: Any = None

    def names(self) -> list[str]:
        return sorted(self.checkers)

    def require(self, type_name: Any, path: str | None = None) -> str:
        if not isinstance(type_name, str) or type_name not in self.checkers:
            raise ConfigError(f"Unknown type: {type_name}", path)
        return type_name

    def check_type(self, value: Any, type_name: str, path: str) -> None:
        self.checkers[self.require(type_name, path)](value, path)

    def with_observable_lib(self, lib: Any) -> TypeRegistry:
        checkers = dict(self.checkers)
        checkers["observable"] = observable_checker(lib)
        return replace(self, checkers=MappingProxyType(checkers), observable_lib=lib)
