from narrato.segmentation.base import BaseTextExtractor, split_paragraphs


class TxtExtractor(BaseTextExtractor):
    """Splits UTF-8 plain text into paragraphs."""

    def extract(self, raw_bytes: bytes) -> list[str]:
        text = raw_bytes.decode("utf-8-sig", errors="replace")
        return split_paragraphs(text)
