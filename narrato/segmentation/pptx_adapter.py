import io
import re
import zipfile
from xml.etree import ElementTree

from narrato.segmentation.base import BaseTextExtractor
from narrato.segmentation.exceptions import DocumentExtractionError

_SLIDE_ENTRY = re.compile(r"^ppt/slides/slide(\d+)\.xml$")
_TEXT_RUN_TAG = "{http://schemas.openxmlformats.org/drawingml/2006/main}t"


def ordered_slide_entries(names: list[str]) -> list[str]:
    """Return slide XML entry names sorted by slide number, not by name."""
    numbered: list[tuple[int, str]] = []
    for name in names:
        match = _SLIDE_ENTRY.match(name)
        if match is not None:
            numbered.append((int(match.group(1)), name))
    return [name for _, name in sorted(numbered)]


class PptxExtractor(BaseTextExtractor):
    """Reads slide text runs straight from the PowerPoint zip container."""

    def extract(self, raw_bytes: bytes) -> list[str]:
        try:
            with zipfile.ZipFile(io.BytesIO(raw_bytes)) as archive:
                entries = ordered_slide_entries(archive.namelist())
                slides = [self._slide_text(archive.read(name)) for name in entries]
        except DocumentExtractionError:
            raise
        except (zipfile.BadZipFile, ElementTree.ParseError, KeyError, OSError) as exc:
            raise DocumentExtractionError(f"pptx extraction failed: {exc}") from exc
        return [text for text in slides if text]

    @staticmethod
    def _slide_text(slide_xml: bytes) -> str:
        root = ElementTree.fromstring(slide_xml)
        runs = [node.text for node in root.iter(_TEXT_RUN_TAG) if node.text]
        return " ".join(runs).strip()
