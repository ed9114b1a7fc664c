import io
from collections.abc import Iterator

import docx
from docx.document import Document as DocxDocument
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph

from narrato.segmentation.base import BaseTextExtractor, split_paragraphs
from narrato.segmentation.exceptions import DocumentExtractionError


class DocxExtractor(BaseTextExtractor):
    """Extracts paragraphs from a Word document using python-docx."""

    def extract(self, raw_bytes: bytes) -> list[str]:
        return split_paragraphs(self.extract_text(raw_bytes))

    def extract_text(self, raw_bytes: bytes) -> str:
        """Convert a docx body to plain text, one blank line between blocks.

        Table cells are flattened in row order where the table sits in the body.

        Raises:
            DocumentExtractionError: if the bytes are not a readable docx package.
        """
        try:
            document = docx.Document(io.BytesIO(raw_bytes))
            blocks = list(self._iter_block_texts(document))
        except DocumentExtractionError:
            raise
        except Exception as exc:
            raise DocumentExtractionError(f"docx extraction failed: {exc}") from exc
        return "\n\n".join(blocks)

    @staticmethod
    def _iter_block_texts(document: DocxDocument) -> Iterator[str]:
        body = document.element.body
        for child in body.iterchildren():
            if child.tag == qn("w:p"):
                yield Paragraph(child, document).text
            elif child.tag == qn("w:tbl"):
                table = Table(child, document)
                for row in table.rows:
                    for cell in row.cells:
                        for paragraph in cell.paragraphs:
                            yield paragraph.text
