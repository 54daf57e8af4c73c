from __future__ import annotations
import json
import pathlib
from typing import Any, Dict
import tomli

from .checkers import MISSING
from .errors import ConfigError

def parse_document(text: str, suffix: str) -> Dict[str, Any]:
    try:
        if suffix == ".toml":
            return tomli.loads(text)
        if suffix == ".json":
            return json.loads(text)
    except (tomli.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Unable to parse {suffix} document: {exc}") from exc
    raise ConfigError(f"Unsupported document type: {suffix or 'no suffix'}")

def load_document(path: str | pathlib.Path) -> Any:
    path = pathlib.Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc
    return parse_document(text, path.suffix.lower())

def load_pattern(path: str | pathlib.Path) -> Any:
    # A lone string pattern cannot be a TOML document, so it lives under `pattern`.
    document = load_document(path)
    if isinstance(document, dict) and "pattern" in document:
        return document["pattern"]
    return document

def select(document: Any, key: str | None) -> Any:
    """Walk a dotted key into a loaded document, yielding MISSING when absent."""
    if not key:
        return document
    current = document
    for part in key.split("."):
        if not isinstance(current, dict):
            return MISSING
        current = current.get(part, MISSING)
    return current
