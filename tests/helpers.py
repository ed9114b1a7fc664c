"""Document builders and fakes shared by unit and integration tests."""

import io
import zipfile
from xml.sax.saxutils import escape

import docx

_SLIDE_TEMPLATE = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<p:sld xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main" '
    'xmlns:p="http://schemas.openxmlformats.org/presentationml/2006/main">'
    "<p:cSld><p:spTree>{shapes}</p:spTree></p:cSld></p:sld>"
)
_SHAPE_TEMPLATE = "<p:sp><p:txBody><a:p>{runs}</a:p></p:txBody></p:sp>"


def build_pptx(slides: list[list[str]]) -> bytes:
    """Build a minimal pptx zip; slides[i] holds the text runs of slide i + 1.

    Entries are written in reverse order so zip order never matches slide order.
    """
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as archive:
        archive.writestr("[Content_Types].xml", "<Types/>")
        for number in range(len(slides), 0, -1):
            runs = "".join(f"<a:r><a:t>{escape(t)}</a:t></a:r>" for t in slides[number - 1])
            xml = _SLIDE_TEMPLATE.format(shapes=_SHAPE_TEMPLATE.format(runs=runs))
            archive.writestr(f"ppt/slides/slide{number}.xml", xml)
        archive.writestr("ppt/slides/_rels/slide1.xml.rels", "<Relationships/>")
        archive.writestr("ppt/slideLayouts/slideLayout1.xml", "<layout/>")
    return buf.getvalue()


def build_docx(paragraphs: list[str], table: list[list[str]] | None = None) -> bytes:
    """Build a docx with the given paragraphs, then an optional table."""
    document = docx.Document()
    for text in paragraphs:
        document.add_paragraph(text)
    if table:
        grid = document.add_table(rows=len(table), cols=len(table[0]))
        for r, row in enumerate(table):
            for c, value in enumerate(row):
                grid.cell(r, c).text = value
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
