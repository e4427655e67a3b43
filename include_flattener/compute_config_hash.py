"""Logic for computing stable hashes of configuration objects."""

import hashlib
import json
from typing import Any


def compute_config_hash(config: dict[str, Any]) -> str:
    """Return a SHA-256 hex digest of the effective config.

    Covers the directive syntax, scan rules, input base and encoding after
    command-line overrides, so two reports with the same hash were produced
    under the same rules. Key order does not matter.
    """
    canonical = json.dumps(config, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
