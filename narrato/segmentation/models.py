from dataclasses import dataclass


@dataclass(frozen=True)
class Document:
    """Uploaded document bytes with the declared format tag (docx, pptx, txt)."""

    raw_bytes: bytes
    format: str


@dataclass(frozen=True)
class Segment:
    """One contiguous unit of text narrated as one slide."""

    index: int
    text: str

    def __post_init__(self) -> None:
        if not self.text or self.text != self.text.strip():
            raise ValueError("Segment text must be non-empty and trimmed")
