"""Run configuration: defaults, JSON loading and validation.

A config file is optional.  Whatever it sets is merged over
DEFAULT_CONFIG, and explicit CLI options win over both.
"""

from __future__ import annotations

import json
from pathlib import Path

from kwic.engine import EMIT_MODES, EMIT_NORMALIZED

VALID_FORMATS = {"text", "json", "table"}

DEFAULT_CONFIG: dict = {
    "stop_words": None,
    "case_sensitive": False,
    "emit": EMIT_NORMALIZED,
    "format": "text",
    "output": None,
}

_PATH_KEYS = ("stop_words", "output")


def validate_config(config: dict) -> list[str]:
    """Check field types and allowed values.  Returns list of error strings."""
    if not isinstance(config, dict):
        return ["Config must be a JSON object."]

    errors: list[str] = []

    unknown = sorted(set(config) - set(DEFAULT_CONFIG))
    if unknown:
        errors.append(f"Unknown config keys: {unknown}. Allowed: {sorted(DEFAULT_CONFIG)}.")

    for key in _PATH_KEYS:
        value = config.get(key)
        if value is not None and (not isinstance(value, str) or not value):
            errors.append(f"'{key}' must be a non-empty string or null.")

    if not isinstance(config.get("case_sensitive", False), bool):
        errors.append("'case_sensitive' must be a boolean.")

    emit = config.get("emit", EMIT_NORMALIZED)
    if not isinstance(emit, str) or emit not in EMIT_MODES:
        errors.append(f"'emit' must be one of {sorted(EMIT_MODES)}, got '{emit}'.")

    fmt = config.get("format", "text")
    if not isinstance(fmt, str) or fmt not in VALID_FORMATS:
        errors.append(f"'format' must be one of {sorted(VALID_FORMATS)}, got '{fmt}'.")

    if fmt == "table" and config.get("output"):
        errors.append("'format: table' renders to the terminal and cannot be combined with 'output'.")

    return errors


def load_config(config_path: str | None) -> tuple[dict, list[str]]:
    """Read a JSON config and merge it over the defaults.

    Returns (config, errors); on any error the config is the defaults.
    Relative paths inside the file are resolved against its directory.
    """
    if config_path is None:
        return dict(DEFAULT_CONFIG), []

    path = Path(config_path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        return dict(DEFAULT_CONFIG), [f"Invalid JSON: {e}"]
    except FileNotFoundError:
        return dict(DEFAULT_CONFIG), [f"Config file not found: {config_path}"]
    except (OSError, UnicodeDecodeError) as e:
        return dict(DEFAULT_CONFIG), [f"Cannot read config {config_path}: {e}"]

    errors = validate_config(raw)
    if errors:
        return dict(DEFAULT_CONFIG), errors

    config = {**DEFAULT_CONFIG, **raw}
    for key in _PATH_KEYS:
        if config[key] is not None:
            config[key] = str(path.parent / config[key])
    return config, []
