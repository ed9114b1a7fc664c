from typing import ClassVar

from narrato.logging.logger import Log
from narrato.segmentation.base import BaseTextExtractor
from narrato.segmentation.docx_adapter import DocxExtractor
from narrato.segmentation.exceptions import EmptyContentError, UnsupportedFormatError
from narrato.segmentation.models import Document, Segment
from narrato.segmentation.pptx_adapter import PptxExtractor
from narrato.segmentation.txt_adapter import TxtExtractor


def format_from_filename(filename: str) -> str:
    """Return the lowercased extension of a file name ('' when it has none)."""
    _, dot, extension = filename.rpartition(".")
    return extension.lower() if dot else ""


class Segmenter:
    """Turns a document of a declared format into ordered slide segments."""

    ADAPTERS: ClassVar[dict[str, type[BaseTextExtractor]]] = {
        "docx": DocxExtractor,
        "pptx": PptxExtractor,
        "txt": TxtExtractor,
    }

    def __init__(self, adapters: dict[str, BaseTextExtractor] | None = None) -> None:
        if adapters is None:
            adapters = {fmt: adapter_cls() for fmt, adapter_cls in self.ADAPTERS.items()}
        self._adapters = adapters

    @property
    def supported_formats(self) -> list[str]:
        return sorted(self._adapters)

    def check_format(self, fmt: str) -> BaseTextExtractor:
        """Resolve the extractor for a format tag.

        Raises:
            UnsupportedFormatError: if the format has no registered extractor.
        """
        adapter = self._adapters.get(fmt.lower())
        if adapter is None:
            supported = ", ".join(f".{name}" for name in self.supported_formats)
            raise UnsupportedFormatError(
                f"Unsupported file type '{fmt}'. Please upload {supported} files."
            )
        return adapter

    def segment(self, document: Document) -> list[Segment]:
        """Extract segments in document order.

        Raises:
            UnsupportedFormatError: before any parsing, for unknown formats.
            EmptyContentError: if extraction yields no text.
            DocumentExtractionError: if the container is corrupt.
        """
        adapter = self.check_format(document.format)
        pieces = adapter.extract(document.raw_bytes)
        segments = [
            Segment(index=index, text=text)
            for index, text in enumerate(piece.strip() for piece in pieces if piece.strip())
        ]
        if not segments:
            raise EmptyContentError("No text content found in the uploaded file.")
        Log.info(f"Segmented {document.format} document into {len(segments)} segments")
        return segments
