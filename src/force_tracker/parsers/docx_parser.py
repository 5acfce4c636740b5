# src/force_tracker/parsers/docx_parser.py

import logging

import docx

from force_tracker.analysis.extractors import extract_headings, extract_sections
from force_tracker.errors import EmptyContentError

from .base import DocumentParser, DocumentSource, as_stream
from .models import ExtractedDocument

logger = logging.getLogger(__name__)


class DocxParser(DocumentParser):
    """
    Word (.docx) parser.
    - Raw text is the paragraph texts joined by newlines
    - Headings are recovered line by line with the text heuristic
    - Sections split wherever a line exactly matches a heading
    """

    def parse(self, source: DocumentSource) -> ExtractedDocument:
        document = docx.Document(as_stream(source))
        text = "\n".join(paragraph.text for paragraph in document.paragraphs)

        if not text.strip():
            raise EmptyContentError("Word document contains no text")

        headings = extract_headings(text)
        logger.debug(
            "Word document: %d paragraphs, %d headings",
            len(document.paragraphs),
            len(headings),
        )

        return ExtractedDocument(
            text=text,
            headings=headings,
            sections=extract_sections(text, headings),
            metadata={"source_type": "docx", "paragraphs": len(document.paragraphs)},
        )
