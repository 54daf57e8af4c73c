from __future__ import annotations
from typing import Any

INVALID_CONFIG = "INVALID_CONFIG"
INVALID_INPUT_PATTERN = "INVALID_INPUT_PATTERN"

class SuperSchemaError(Exception):
    def __init__(self, message: str, code: str, status: int, path: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status = status
        self.path = path

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "status": self.status,
            "path": self.path,
        }

class ConfigError(SuperSchemaError):
    """The pattern or the setup is broken, not the data."""
    def __init__(self, message: str, path: str | None = None):
        super().__init__(message, INVALID_CONFIG, 500, path)

class PatternError(SuperSchemaError):
    """The value under test does not match a well-formed pattern."""
    def __init__(self, message: str, path: str | None = None):
        super().__init__(message, INVALID_INPUT_PATTERN, 400, path)
