"""
Fixed-window text chunking task.

Splits extracted document text into overlapping character windows. Every
character of the input lands in at least one window and windows are emitted
in source order.

Dependencies: None (pure domain logic)
System role: Second stage of document ingestion pipeline
"""

from ..models import Chunk


def chunk_text(text: str | None, max_chunk_length: int, overlap_length: int) -> list[str]:
    """
    Split text into overlapping fixed-length windows.

    The window start advances by ``max_chunk_length - overlap_length`` each
    step; the final window ends exactly at the end of the text. Windows whose
    content is only whitespace are dropped.

    Args:
        text: Source text. None or empty yields no chunks.
        max_chunk_length: Maximum window length in characters (> 0)
        overlap_length: Characters shared by consecutive windows (0 <= overlap < length)

    Returns:
        list[str]: Non-empty chunk strings in source order

    Raises:
        ValueError: When the window parameters are invalid
    """
    if max_chunk_length <= 0:
        raise ValueError("max_chunk_length must be positive")
    if overlap_length < 0 or overlap_length >= max_chunk_length:
        raise ValueError("overlap_length must be >= 0 and < max_chunk_length")

    if not text:
        return []

    step = max_chunk_length - overlap_length
    length = len(text)
    windows: list[str] = []
    start = 0
    while True:
        end = min(start + max_chunk_length, length)
        windows.append(text[start:end])
        if end >= length:
            break
        start += step

    return [window for window in windows if window.strip()]


class ChunkingTask:
    """Split a document's text into sequenced Chunk models."""

    def __init__(self, chunk_size: int = 1000, chunk_overlap: int = 100) -> None:
        """
        Initialize chunking task with window configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            chunk_overlap: Overlap between consecutive chunks

        Raises:
            ValueError: When the window configuration is invalid
        """
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        if chunk_overlap < 0 or chunk_overlap >= chunk_size:
            raise ValueError("chunk_overlap must be >= 0 and < chunk_size")
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap

    def chunk(self, text: str, document_key: str) -> list[Chunk]:
        """
        Split text into chunks bound to their parent document.

        Sequence indices are contiguous over the non-empty chunks.

        Args:
            text: Extracted document text
            document_key: Storage key of the parent document

        Returns:
            list[Chunk]: Ordered chunks, possibly empty
        """
        pieces = chunk_text(text, self.chunk_size, self.chunk_overlap)
        return [
            Chunk(text=piece, sequence_index=index, document_key=document_key)
            for index, piece in enumerate(pieces)
        ]
