# src/force_tracker/parsers/pdf_parser.py

import logging
from typing import Any, cast

import pdfplumber

from force_tracker.analysis.text import is_heading
from force_tracker.errors import EmptyContentError

from .base import DocumentParser, DocumentSource, as_stream
from .models import ExtractedDocument

logger = logging.getLogger(__name__)

MAX_PAGES = 50
HEADING_FONT_SIZE = 14.0
HEADING_GAP = 10.0
HEADING_MAX_LENGTH = 100


class PdfParser(DocumentParser):
    """
    Deterministic PDF parser.
    - Uses page order, at most `max_pages` pages
    - Classifies text lines as headings by text heuristic or font metrics
    - Flushes the running section whenever a heading starts
    """

    def __init__(
        self,
        max_pages: int = MAX_PAGES,
        heading_font_size: float = HEADING_FONT_SIZE,
        heading_gap: float = HEADING_GAP,
    ) -> None:
        self._max_pages = max_pages
        self._heading_font_size = heading_font_size
        self._heading_gap = heading_gap

    def parse(self, source: DocumentSource) -> ExtractedDocument:
        headings: list[str] = []
        sections: list[str] = []
        current_section: list[str] = []
        pages: list[str] = []

        # pdfplumber.open accepts path-like or buffer objects; cast to Any
        with pdfplumber.open(cast(Any, as_stream(source))) as pdf:
            page_count = len(pdf.pages)

            for page in pdf.pages[: self._max_pages]:
                lines = page.extract_text_lines(strip=True, return_chars=True)
                page_lines: list[str] = []

                for index, line in enumerate(lines):
                    clean = line["text"].strip()
                    if not clean:
                        continue
                    page_lines.append(clean)

                    next_line = lines[index + 1] if index + 1 < len(lines) else None
                    if self._is_heading(clean, line, next_line):
                        if current_section:
                            sections.append("\n".join(current_section))
                            current_section = []
                        headings.append(clean)
                        continue

                    current_section.append(clean)

                pages.append("\n".join(page_lines))

        if current_section:
            sections.append("\n".join(current_section))

        text = "\n\n".join(page for page in pages if page)
        if not text.strip():
            raise EmptyContentError("PDF contains no extractable text")

        if page_count > self._max_pages:
            logger.info(
                "PDF has %d pages, only the first %d were read",
                page_count,
                self._max_pages,
            )

        return ExtractedDocument(
            text=text,
            headings=headings,
            sections=sections,
            metadata={"source_type": "pdf", "pages": min(page_count, self._max_pages)},
        )

    def _is_heading(
        self, text: str, line: dict[str, Any], next_line: dict[str, Any] | None
    ) -> bool:
        """
        Text heuristic, or a large isolated line:
        - font size above the threshold
        - vertical gap to the next line above the threshold (or last on page)
        - shorter than 100 characters
        """
        if is_heading(text):
            return True
        if len(text) >= HEADING_MAX_LENGTH:
            return False
        if self._font_size(line) <= self._heading_font_size:
            return False
        if next_line is None:
            return True
        return next_line["top"] - line["bottom"] > self._heading_gap

    def _font_size(self, line: dict[str, Any]) -> float:
        sizes = [char.get("size", 0.0) for char in line.get("chars", [])]
        return max(sizes) if sizes else 0.0
