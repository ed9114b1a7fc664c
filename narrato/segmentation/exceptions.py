class SegmentationError(Exception):
    """Base exception for all segmentation errors."""


class UnsupportedFormatError(SegmentationError):
    """Raised when a document format has no registered extractor."""


class EmptyContentError(SegmentationError):
    """Raised when a document yields no non-empty segments."""


class DocumentExtractionError(SegmentationError):
    """Raised when a document container cannot be read or parsed."""
