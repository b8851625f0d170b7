"""Centralized canonical JSON serialization.

This module provides the single serialization routine used everywhere a
document is measured or written: size accounting, optimized file output,
CLI reports, and keyframe value comparison.

Critical: the byte count reported as "optimized size" must match the bytes
written to disk, so nothing else may serialize documents.
"""

import json
from typing import Any

ENCODING_ERRORS = "surrogatepass"


def canonical_dumps(obj: Any) -> str:
    """
    Canonical JSON serialization for byte-stable output.

    Rules:
    - UTF-8 text (non-ASCII characters are kept, not escaped)
    - Sorted keys
    - Compact separators (",", ":")
    - Lists keep their order
    - No trailing whitespace

    Args:
        obj: Python object to serialize

    Returns:
        Canonical JSON string
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False  # UTF-8 encoding
    )


def canonical_bytes(obj: Any) -> bytes:
    """Encode the canonical serialization of obj as UTF-8.

    Lone surrogates (accepted by json.loads from \\ud800-style escapes) are
    written as their three-byte sequences rather than rejected.
    """
    return canonical_dumps(obj).encode("utf-8", errors=ENCODING_ERRORS)


def canonical_size(obj: Any) -> int:
    """Return the byte length of canonical_bytes(obj)."""
    return len(canonical_bytes(obj))
