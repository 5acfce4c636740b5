# src/force_tracker/parsers/pptx_parser.py

import logging

from pptx import Presentation
from pptx.shapes.base import BaseShape
from pptx.shapes.group import GroupShape

from force_tracker.errors import EmptyContentError

from .base import DocumentParser, DocumentSource, as_stream
from .models import ExtractedDocument

logger = logging.getLogger(__name__)


def _text_lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def _shape_lines(shape: BaseShape) -> list[str]:
    """Text of one shape: group members in order, table cells row by row."""
    if isinstance(shape, GroupShape):
        return [line for member in shape.shapes for line in _shape_lines(member)]
    if shape.has_table:
        return [
            line
            for row in shape.table.rows
            for cell in row.cells
            for line in _text_lines(cell.text)
        ]
    if shape.has_text_frame:
        return _text_lines(shape.text_frame.text)
    return []


class PptxParser(DocumentParser):
    """
    PowerPoint (.pptx) parser.
    - One heading per slide, taken from the title placeholder
    - The slide's other shapes form its section, including grouped
      shapes and table cells
    - Slides are separated by blank lines in the raw text
    """

    def parse(self, source: DocumentSource) -> ExtractedDocument:
        presentation = Presentation(as_stream(source))

        headings: list[str] = []
        sections: list[str] = []
        slides: list[str] = []

        for slide in presentation.slides:
            title_shape = slide.shapes.title
            title_id = title_shape.shape_id if title_shape is not None else None
            title = title_shape.text_frame.text.strip() if title_shape is not None else ""

            body: list[str] = []
            for shape in slide.shapes:
                if shape.shape_id != title_id:
                    body.extend(_shape_lines(shape))

            if title:
                headings.append(title)
            if body:
                sections.append("\n".join(body))

            slide_text = "\n".join([title, *body] if title else body)
            if slide_text:
                slides.append(slide_text)

        text = "\n\n".join(slides)
        if not text.strip():
            raise EmptyContentError("Presentation contains no text")

        logger.debug("Presentation: %d slides with text", len(slides))

        return ExtractedDocument(
            text=text,
            headings=headings,
            sections=sections,
            metadata={"source_type": "pptx", "slides": len(presentation.slides)},
        )
