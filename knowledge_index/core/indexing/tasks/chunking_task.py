"""
Text chunking task using RecursiveCharacterTextSplitter.

Splits normalized document text into overlapping chunks, falling back through
separators (paragraph, line, space, comma, character) until pieces fit.

Dependencies: langchain_text_splitters
System role: Chunking stage of the indexing pipeline
"""

from dataclasses import dataclass, field

from langchain_text_splitters import RecursiveCharacterTextSplitter

DEFAULT_SEPARATORS = ["\n\n", "\n", " ", ",", ""]


@dataclass
class ChunkingResult:
    """Non-empty chunks plus the number of whitespace-only pieces dropped."""

    chunks: list[str] = field(default_factory=list)
    skipped_empty: int = 0


def normalize_text(text: str) -> str:
    """Unify line endings so separators match regardless of origin platform."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class ChunkingTask:
    """Split text into chunks using RecursiveCharacterTextSplitter."""

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        separators: list[str] | None = None,
    ) -> None:
        """
        Initialize chunking task with splitter configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks
            separators: Separators in priority order ('' splits per character)

        Raises:
            ValueError: When sizes are inconsistent
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if chunk_overlap < 0 or chunk_overlap >= chunk_size:
            raise ValueError("chunk_overlap must be >= 0 and smaller than chunk_size")

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self._splitter = RecursiveCharacterTextSplitter(
            chunk_size=chunk_size,
            chunk_overlap=chunk_overlap,
            separators=list(separators or DEFAULT_SEPARATORS),
            length_function=len,
            # Boundary whitespace stays in the chunks so nothing is dropped.
            strip_whitespace=False,
        )

    def split(self, text: str) -> ChunkingResult:
        """
        Split text into chunks.

        Args:
            text: Raw document text

        Returns:
            ChunkingResult: Non-empty chunks and the count of skipped empty ones
        """
        result = ChunkingResult()
        if not text:
            return result

        for piece in self._splitter.split_text(normalize_text(text)):
            if piece.strip():
                result.chunks.append(piece)
            else:
                result.skipped_empty += 1
        return result
