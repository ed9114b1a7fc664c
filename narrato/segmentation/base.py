import re
from abc import ABC, abstractmethod

_PARAGRAPH_BREAK = re.compile(r"\n{2,}")


def split_paragraphs(text: str) -> list[str]:
    """Split plain text on blank-line runs, trimming and dropping empty pieces."""
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    pieces = (piece.strip() for piece in _PARAGRAPH_BREAK.split(normalized))
    return [piece for piece in pieces if piece]


class BaseTextExtractor(ABC):
    """Contract for all format-specific text extraction adapters."""

    @abstractmethod
    def extract(self, raw_bytes: bytes) -> list[str]:
        """Extract ordered, trimmed, non-empty text pieces from document bytes.

        Args:
            raw_bytes: Raw file content of the declared format.

        Returns:
            Text pieces in document order. May be empty.

        Raises:
            DocumentExtractionError: if the container cannot be read.
        """
