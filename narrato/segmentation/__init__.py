from narrato.segmentation.exceptions import (
    DocumentExtractionError,
    EmptyContentError,
    SegmentationError,
    UnsupportedFormatError,
)
from narrato.segmentation.models import Document, Segment
from narrato.segmentation.segmenter import Segmenter, format_from_filename

__all__ = [
    "Document",
    "DocumentExtractionError",
    "EmptyContentError",
    "Segment",
    "SegmentationError",
    "Segmenter",
    "UnsupportedFormatError",
    "format_from_filename",
]
