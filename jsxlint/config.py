"""Load linter configuration from a YAML file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from .severity import Severity
from .utils import read_yaml_file

DEFAULT_CONFIG_FILENAME = ".jsxlint.yaml"
DEFAULT_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs")
DEFAULT_IGNORE_PATTERNS = ("node_modules/*", "*/node_modules/*")

RULE_LEVELS: Dict[str, Optional[Severity]] = {
    "off": None,
    "allow": None,
    "warn": Severity.WARNING,
    "warning": Severity.WARNING,
    "error": Severity.ERROR,
    "deny": Severity.ERROR,
}


class ConfigError(ValueError):
    """Raised when a configuration file is missing or malformed."""


@dataclass
class LintConfig:
    """Rule levels and file selection settings."""

    rules: Dict[str, Optional[Severity]] = field(default_factory=dict)
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    ignore_patterns: Tuple[str, ...] = DEFAULT_IGNORE_PATTERNS

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LintConfig":
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping")
        unknown = set(data) - {"rules", "extensions", "ignore_patterns"}
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        rules = data.get("rules") or {}
        if not isinstance(rules, dict):
            raise ConfigError("'rules' must map rule names to levels")
        levels: Dict[str, Optional[Severity]] = {}
        for name, level in rules.items():
            # YAML reads bare off/on as booleans
            if isinstance(level, bool):
                key = "warn" if level else "off"
            else:
                key = str(level).lower()
            if key not in RULE_LEVELS:
                choices = ", ".join(RULE_LEVELS)
                raise ConfigError(f"Invalid level {level!r} for rule {name!r} (expected one of: {choices})")
            levels[str(name)] = RULE_LEVELS[key]

        return cls(
            rules=levels,
            extensions=_string_tuple(data, "extensions", DEFAULT_EXTENSIONS),
            ignore_patterns=_string_tuple(data, "ignore_patterns", DEFAULT_IGNORE_PATTERNS),
        )


def _string_tuple(data: Dict[str, Any], key: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)):
        return tuple(str(item) for item in value)
    raise ConfigError(f"'{key}' must be a string or a list of strings")


def load_config(path: Optional[str] = None) -> LintConfig:
    """Load ``path``, or ``.jsxlint.yaml`` from the working directory when present."""

    if path is None:
        candidate = Path(DEFAULT_CONFIG_FILENAME)
        if not candidate.exists():
            return LintConfig()
    else:
        candidate = Path(path)
        if not candidate.exists():
            raise ConfigError(f"Configuration file not found: {path}")
    try:
        data = read_yaml_file(candidate)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {candidate}: {exc}") from exc
    if data is None:
        return LintConfig()
    return LintConfig.from_dict(data)
