from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .classifier import MAX_EQUAL_ENTRIES
from .depth import DEFAULT_MAX_DEPTH, DEFAULT_ROOT_DIR
from .errors import ConfigError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1
DEFAULT_CFG_FILE = ".importrules.yaml"

# --------------------------------------------------------------------------- #
# Defaults
# --------------------------------------------------------------------------- #
_DEFAULT_CFG: Dict[str, Any] = {
    "schema_version": SCHEMA_VERSION,
    "sort": {"equal": [], "local": []},
    "depth": {"max_depth": DEFAULT_MAX_DEPTH, "root_dir": DEFAULT_ROOT_DIR},
    "rules": {"sort_imports": True, "deep_relative": True},
    "exclude": ["node_modules/"],
}

_yaml = YAML(typ="safe")


@dataclass(frozen=True)
class SortConfig:
    """Options of the import ordering rule."""
    equal: List[str] = field(default_factory=list)
    local: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class DepthConfig:
    """Options of the deep relative imports rule."""
    max_depth: int = DEFAULT_MAX_DEPTH
    root_dir: str = DEFAULT_ROOT_DIR


@dataclass(frozen=True)
class Settings:
    sort: SortConfig = field(default_factory=SortConfig)
    depth: DepthConfig = field(default_factory=DepthConfig)
    sort_imports: bool = True
    deep_relative: bool = True
    exclude: List[str] = field(default_factory=lambda: ["node_modules/"])

    @staticmethod
    def from_dict(raw: Optional[Dict[str, Any]]) -> Settings:
        """Merge a raw mapping over the defaults and validate it into Settings."""
        cfg = _merge_defaults(raw or {})

        version = cfg.get("schema_version", SCHEMA_VERSION)
        if version != SCHEMA_VERSION:
            raise ConfigError(f"Unsupported config schema {version} (tool expects {SCHEMA_VERSION})")

        unknown = set(cfg) - set(_DEFAULT_CFG)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

        sort = _section(cfg, "sort")
        equal = _str_list(sort.get("equal"), "sort.equal")
        if len(equal) > MAX_EQUAL_ENTRIES:
            raise ConfigError(f"sort.equal: at most {MAX_EQUAL_ENTRIES} entries are supported, got {len(equal)}")
        local = _str_list(sort.get("local"), "sort.local")

        depth = _section(cfg, "depth")
        max_depth = depth.get("max_depth")
        if not isinstance(max_depth, int) or isinstance(max_depth, bool) or max_depth < 0:
            raise ConfigError(f"depth.max_depth: expected non-negative integer, got {max_depth!r}")
        root_dir = depth.get("root_dir")
        if not isinstance(root_dir, str) or not root_dir:
            raise ConfigError(f"depth.root_dir: expected non-empty string, got {root_dir!r}")

        rules = _section(cfg, "rules")
        for key in ("sort_imports", "deep_relative"):
            if not isinstance(rules.get(key), bool):
                raise ConfigError(f"rules.{key}: expected boolean, got {rules.get(key)!r}")

        return Settings(
            sort=SortConfig(equal=equal, local=local),
            depth=DepthConfig(max_depth=max_depth, root_dir=root_dir.rstrip("/")),
            sort_imports=rules["sort_imports"],
            deep_relative=rules["deep_relative"],
            exclude=_str_list(cfg.get("exclude"), "exclude"),
        )


# --------------------------------------------------------------------------- #
# Helpers
# --------------------------------------------------------------------------- #
def _merge_defaults(raw: Dict[str, Any]) -> Dict[str, Any]:
    """User values over defaults; nested sections are merged key by key."""
    cfg = copy.deepcopy(_DEFAULT_CFG)
    for key, value in raw.items():
        if isinstance(value, dict) and isinstance(cfg.get(key), dict):
            cfg[key].update(value)
        else:
            cfg[key] = value
    return cfg


def _section(cfg: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = cfg.get(name)
    if not isinstance(value, dict):
        raise ConfigError(f"{name}: expected mapping, got {type(value).__name__}")
    unknown = set(value) - set(_DEFAULT_CFG[name])
    if unknown:
        raise ConfigError(f"{name}: unknown keys: {', '.join(sorted(unknown))}")
    return value


def _str_list(value: Any, path: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{path}: expected list of strings, got {value!r}")
    return list(value)


# --------------------------------------------------------------------------- #
# Public API
# --------------------------------------------------------------------------- #
def load_config(path: Path) -> Settings:
    """
    Load .importrules.yaml.

    • Missing file: defaults.
    • Missing schema_version: current version assumed.
    • Anything malformed raises ConfigError.
    """
    if not path.exists():
        logger.debug("No config at %s, using defaults", path)
        return Settings()

    try:
        with path.open(encoding="utf-8") as f:
            raw = _yaml.load(f) or {}
    except YAMLError as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")

    return Settings.from_dict(raw)


def find_config(root: Path, explicit: Optional[Path] = None) -> Settings:
    """Explicit --config path wins; otherwise <root>/.importrules.yaml."""
    if explicit is not None:
        if not explicit.is_file():
            raise ConfigError(f"Config file not found: {explicit}")
        return load_config(explicit)
    return load_config(root / DEFAULT_CFG_FILE)


__all__ = [
    "SCHEMA_VERSION",
    "DEFAULT_CFG_FILE",
    "SortConfig",
    "DepthConfig",
    "Settings",
    "load_config",
    "find_config",
]
