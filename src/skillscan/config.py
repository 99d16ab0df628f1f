"""Scan configuration: recognized files, ignored directories, enabled rules.

The defaults reproduce the built-in scanning contract. A YAML file can widen
the set of scanned extensions, add directory names to skip, or narrow the
rule catalog to selected categories::

    extensions: [".txt"]
    ignore_dirs: ["vendor", "dist"]
    categories: ["execution", "exfiltration", "secrets"]

Extensions and ignored directories *extend* the defaults; they never remove
the built-in entries.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from skillscan.core.analyzer import Category
from skillscan.exceptions import ConfigError

MANIFEST_NAME = "SKILL.md"

DEFAULT_EXTENSIONS: frozenset[str] = frozenset({
    ".md",
    ".js",
    ".ts",
    ".py",
    ".sh",
    ".bash",
    ".json",
    ".yaml",
    ".yml",
    ".toml",
})

DEFAULT_IGNORE_DIRS: frozenset[str] = frozenset({"node_modules"})

_KNOWN_KEYS = {"extensions", "ignore_dirs", "categories"}


@dataclass(frozen=True)
class ScanConfig:
    """Immutable settings for one scan run.

    Attributes:
        extensions: Lowercase file suffixes scanned during directory walks.
        ignore_dirs: Directory names skipped at every depth.
        manifest_name: Reserved manifest filename (compared case-insensitively).
        categories: Rule groups to apply. ``None`` applies the full catalog.
    """

    extensions: frozenset[str] = DEFAULT_EXTENSIONS
    ignore_dirs: frozenset[str] = DEFAULT_IGNORE_DIRS
    manifest_name: str = MANIFEST_NAME
    categories: frozenset[Category] | None = field(default=None)

    def is_manifest(self, path: Path) -> bool:
        return path.name.lower() == self.manifest_name.lower()

    def is_scannable(self, path: Path) -> bool:
        return path.suffix.lower() in self.extensions or self.is_manifest(path)


def load_config(path: str | Path) -> ScanConfig:
    """Load a YAML configuration file on top of the defaults.

    Args:
        path: Path to the YAML file.

    Returns:
        A ``ScanConfig`` merging the file's settings with the defaults.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or
            contains unknown keys or malformed values.
    """
    config_path = Path(path)
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

    if raw is None:
        return ScanConfig()
    if not isinstance(raw, dict):
        raise ConfigError("Config must be a mapping at the top level")

    unknown = set(raw) - _KNOWN_KEYS
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(sorted(unknown))}")

    config = ScanConfig()
    if "extensions" in raw:
        extra = {_normalise_extension(e) for e in _string_list(raw, "extensions")}
        config = replace(config, extensions=config.extensions | extra)
    if "ignore_dirs" in raw:
        extra_dirs = set(_string_list(raw, "ignore_dirs"))
        config = replace(config, ignore_dirs=config.ignore_dirs | extra_dirs)
    if "categories" in raw:
        config = replace(
            config,
            categories=frozenset(
                _parse_category(name) for name in _string_list(raw, "categories")
            ),
        )
    return config


def _string_list(raw: dict[str, Any], key: str) -> list[str]:
    value = raw[key]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return [v.strip() for v in value if v.strip()]


def _normalise_extension(ext: str) -> str:
    ext = ext.lower()
    return ext if ext.startswith(".") else f".{ext}"


def _parse_category(name: str) -> Category:
    try:
        return Category(name.lower().replace("-", "_"))
    except ValueError:
        valid = ", ".join(c.value for c in Category)
        raise ConfigError(
            f"Unknown category '{name}' (expected one of: {valid})"
        ) from None
