"""Sanity checks for a merged configuration."""

import codecs
from typing import Any

from include_flattener.errors import ConfigError
from include_flattener.resolver import REVISIT_POLICIES

RELATIVE_TO_CHOICES = ("program", "cwd")


def validate_config(config: dict[str, Any]) -> None:
    """Raise ConfigError if the configuration cannot drive a run."""
    for section in ("directive", "scan", "input"):
        if not isinstance(config.get(section), dict):
            msg = f"{section} must be a mapping"
            raise ConfigError(msg)

    directive = config["directive"]
    for key in ("prefix", "strip_marker"):
        if not isinstance(directive.get(key), str) or not directive[key]:
            msg = f"directive.{key} must be a non-empty string"
            raise ConfigError(msg)

    scan = config["scan"]
    limit = scan.get("early_stop_after")
    # bool is an int subclass
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        msg = f"scan.early_stop_after must be a positive integer, got {limit!r}"
        raise ConfigError(msg)
    if scan.get("revisit_policy") not in REVISIT_POLICIES:
        msg = (
            f"scan.revisit_policy must be one of {', '.join(REVISIT_POLICIES)}, "
            f"got {scan.get('revisit_policy')!r}"
        )
        raise ConfigError(msg)

    relative_to = config["input"].get("relative_to")
    if relative_to not in RELATIVE_TO_CHOICES:
        msg = (
            f"input.relative_to must be one of {', '.join(RELATIVE_TO_CHOICES)}, "
            f"got {relative_to!r}"
        )
        raise ConfigError(msg)

    encoding = config.get("encoding")
    try:
        codecs.lookup(encoding)
    except (LookupError, TypeError) as exc:
        msg = f"encoding must name a known codec, got {encoding!r}"
        raise ConfigError(msg) from exc
