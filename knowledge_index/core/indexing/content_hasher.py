"""
Content fingerprinting for change detection.

Hashes are computed over the raw UTF-8 bytes of the document, never over
normalized text, so any byte-level edit is detected as a change.

Dependencies: hashlib
System role: Change detection for incremental indexing
"""

import hashlib


def compute_content_hash(content: str | bytes, algorithm: str = "sha256") -> str:
    """Compute hash from document content.

    Args:
        content: Document text (encoded as UTF-8) or raw bytes.
        algorithm: Hash algorithm to use (default: sha256).

    Returns:
        Hexadecimal string of the computed hash.

    Raises:
        ValueError: If unsupported algorithm is specified.
    """
    if algorithm not in hashlib.algorithms_guaranteed:
        raise ValueError(f"Unsupported hash algorithm: {algorithm}")

    raw = content.encode("utf-8") if isinstance(content, str) else content
    hash_obj = hashlib.new(algorithm)
    hash_obj.update(raw)
    return hash_obj.hexdigest()
