"""Tests for content fingerprinting."""

import hashlib

import pytest

from knowledge_index.core.indexing import compute_content_hash


class TestComputeContentHash:
    """Test hashing of raw document content."""

    def test_sha256_of_utf8_bytes(self) -> None:
        """Should hash the UTF-8 encoding of strings."""
        text = "příliš žluťoučký kůň"
        assert compute_content_hash(text) == hashlib.sha256(text.encode("utf-8")).hexdigest()

    def test_str_and_bytes_agree(self) -> None:
        assert compute_content_hash("abc") == compute_content_hash(b"abc")

    def test_no_normalization(self) -> None:
        """Line-ending differences are content changes."""
        assert compute_content_hash("a\r\nb") != compute_content_hash("a\nb")

    def test_other_algorithm(self) -> None:
        assert compute_content_hash("abc", algorithm="md5") == hashlib.md5(b"abc").hexdigest()

    def test_unsupported_algorithm_raises(self) -> None:
        with pytest.raises(ValueError, match="Unsupported hash algorithm"):
            compute_content_hash("abc", algorithm="not-a-hash")
