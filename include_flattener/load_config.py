"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from include_flattener.deep_merge import deep_merge
from include_flattener.errors import ConfigError

DEFAULT_CONFIG: dict[str, Any] = {
    "directive": {
        "prefix": '#include "',
        "strip_marker": "#include",
    },
    "scan": {
        "early_stop_after": 5,
        "revisit_policy": "rescan",
    },
    "input": {
        "relative_to": "program",
    },
    "encoding": "utf-8",
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                text = p.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                msg = f"Could not read config file {p}: {exc}"
                raise ConfigError(msg) from exc
            try:
                user_config = yaml.safe_load(text) or {}
            except yaml.YAMLError as exc:
                msg = f"Could not parse config file {p}: {exc}"
                raise ConfigError(msg) from exc
            if not isinstance(user_config, dict):
                msg = f"Config file {p} must contain a mapping"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
    return config
