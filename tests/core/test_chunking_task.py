"""Tests for the recursive text chunker."""

import pytest

from knowledge_index.core.indexing import ChunkingTask
from knowledge_index.core.indexing.tasks.chunking_task import normalize_text


def _assert_covers(text: str, chunks: list[str]) -> None:
    """Every character of text lies inside at least one chunk, in order."""
    covered = 0
    last_start = -1
    for chunk in chunks:
        start = text.find(chunk, last_start + 1)
        assert start != -1, f"chunk not found in order: {chunk[:30]!r}"
        assert start <= covered, f"gap between {covered} and {start}"
        covered = max(covered, start + len(chunk))
        last_start = start
    assert covered == len(text)


class TestChunkingTask:
    """Test ChunkingTask configuration and splitting."""

    def test_defaults(self) -> None:
        task = ChunkingTask()
        assert task.chunk_size == 1000
        assert task.chunk_overlap == 200

    @pytest.mark.parametrize("size,overlap", [(0, 0), (100, 100), (100, 150), (100, -1)])
    def test_invalid_sizes_raise(self, size: int, overlap: int) -> None:
        with pytest.raises(ValueError):
            ChunkingTask(chunk_size=size, chunk_overlap=overlap)

    def test_short_text_is_single_chunk(self) -> None:
        result = ChunkingTask().split("alpha beta\n\ngamma")
        assert result.chunks == ["alpha beta\n\ngamma"]
        assert result.skipped_empty == 0

    def test_empty_text(self) -> None:
        result = ChunkingTask().split("")
        assert result.chunks == []
        assert result.skipped_empty == 0

    def test_chunks_respect_size(self) -> None:
        text = " ".join(f"word{i}" for i in range(400))
        result = ChunkingTask(chunk_size=100, chunk_overlap=20).split(text)
        assert len(result.chunks) > 1
        assert all(len(c) <= 100 for c in result.chunks)

    def test_paragraph_separator_preferred(self) -> None:
        text = "\n\n".join(f"paragraph {i} text" for i in range(5))
        result = ChunkingTask(chunk_size=20, chunk_overlap=0).split(text)
        assert len(result.chunks) == 5
        assert [c.strip() for c in result.chunks] == [f"paragraph {i} text" for i in range(5)]

    def test_line_endings_normalized(self) -> None:
        result = ChunkingTask().split("one\r\ntwo\rthree")
        assert result.chunks == ["one\ntwo\nthree"]

    def test_content_coverage(self) -> None:
        """Concatenated chunks (with overlap) cover the normalized input without gaps."""
        lines = []
        for i in range(300):
            lines.append(f"token{i}")
            if i % 7 == 0:
                lines.append("\r\n")
            if i % 31 == 0:
                lines.append("\n\n")
        text = " ".join(lines)

        task = ChunkingTask(chunk_size=120, chunk_overlap=30)
        result = task.split(text)

        _assert_covers(normalize_text(text), result.chunks)

    def test_content_coverage_without_separators(self) -> None:
        """Character-level fallback still covers everything."""
        text = "".join(str(i * i) for i in range(80))
        result = ChunkingTask(chunk_size=40, chunk_overlap=10).split(text)
        assert all(len(c) <= 40 for c in result.chunks)
        _assert_covers(text, result.chunks)
