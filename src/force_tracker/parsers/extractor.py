# src/force_tracker/parsers/extractor.py

import asyncio
import logging
from time import monotonic

from force_tracker.errors import CorruptDocumentError, DocumentError
from force_tracker.observability import names
from force_tracker.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser, DocumentSource
from .docx_parser import DocxParser
from .fetcher import DocumentFetcher
from .formats import DocumentFormat, detect_format
from .models import ExtractedDocument
from .pdf_parser import PdfParser
from .pptx_parser import PptxParser

logger = logging.getLogger(__name__)


def default_parsers() -> dict[DocumentFormat, DocumentParser]:
    return {
        DocumentFormat.PDF: PdfParser(),
        DocumentFormat.WORD: DocxParser(),
        DocumentFormat.POWERPOINT: PptxParser(),
    }


class DocumentExtractor:
    """Fetches an uploaded file and routes it to the matching format adapter."""

    def __init__(
        self,
        fetcher: DocumentFetcher,
        parsers: dict[DocumentFormat, DocumentParser] | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._fetcher = fetcher
        self._parsers = parsers if parsers is not None else default_parsers()
        self.metrics_hook = metrics_hook

    async def extract(
        self, url: str, mime_type: str, filename: str | None = None
    ) -> ExtractedDocument:
        """Fetch and parse one document.

        The format is checked before any network call.

        Raises:
            UnsupportedFormatError: If the MIME type is not supported.
            FetchError: If the document cannot be downloaded.
            EmptyContentError: If the document has no usable text.
            CorruptDocumentError: If the parsing library rejects the file.
        """
        document_format = detect_format(mime_type, filename or url)
        data = await self._fetcher.fetch(url)
        # Parsers block; keep them off the event loop
        return await asyncio.to_thread(self.parse, data, document_format)

    async def aclose(self) -> None:
        await self._fetcher.aclose()

    def parse(
        self, source: DocumentSource, document_format: DocumentFormat
    ) -> ExtractedDocument:
        parser = self._parsers[document_format]
        start = monotonic()

        try:
            document = parser.parse(source)
        except DocumentError:
            self.metrics_hook.increment(
                names.DOCUMENT_ERRORS_TOTAL, labels={"format": document_format.value}
            )
            raise
        except Exception as exc:
            self.metrics_hook.increment(
                names.DOCUMENT_ERRORS_TOTAL, labels={"format": document_format.value}
            )
            logger.exception("Failed to parse %s document", document_format.value)
            raise CorruptDocumentError(
                f"Could not read {document_format.value} document"
            ) from exc

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.DOCUMENT_PARSE_DURATION,
            elapsed_ms,
            labels={"format": document_format.value},
        )
        self.metrics_hook.increment(
            names.DOCUMENTS_PARSED_TOTAL, labels={"format": document_format.value}
        )
        logger.info(
            "Parsed %s document: %d characters, %d headings, %d sections in %.0fms",
            document_format.value,
            len(document.text),
            len(document.headings),
            len(document.sections),
            elapsed_ms,
        )
        return document
