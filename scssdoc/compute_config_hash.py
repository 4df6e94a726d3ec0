"""Logic for fingerprinting the configuration of an extraction run."""

import hashlib
import json
from typing import Any

# Keys that change which items are extracted or which diagnostics are raised.
HASHED_KEYS = ("extensions", "exclude", "warnings")


def compute_config_hash(config: dict[str, Any]) -> str:
    """Compute a sha256 over the canonical JSON of the extraction settings.

    Settings that only affect scheduling or output layout are left out.
    """
    relevant = {key: config.get(key) for key in HASHED_KEYS}
    config_json = json.dumps(relevant, sort_keys=True, ensure_ascii=True)
    return hashlib.sha256(config_json.encode("utf-8")).hexdigest()
