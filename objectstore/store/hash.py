"""Content identifier helpers."""

import hashlib
import json
from typing import Any


def compute_digest(text: str, algorithm: str = "sha1") -> str:
    """
    Hex digest of a string.
    
    Args:
        text: Text to hash.
        algorithm: Any algorithm name accepted by ``hashlib.new``.
    
    Returns:
        Full hexadecimal digest.
    
    Raises:
        ValueError: If the algorithm is not available.
    """
    return hashlib.new(algorithm, text.encode("utf-8")).hexdigest()


def snapshot_digest(snapshot: dict[str, Any], algorithm: str = "sha1") -> str:
    """
    Deterministic digest of a snapshot mapping.
    
    The mapping is serialized to JSON with sorted keys. Values that are not
    JSON-native fall back to ``str()``.
    """
    serialized = json.dumps(snapshot, sort_keys=True, ensure_ascii=False, default=str)
    return compute_digest(serialized, algorithm)
