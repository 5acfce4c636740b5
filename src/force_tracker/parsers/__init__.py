# src/force_tracker/parsers/__init__.py

"""Text extraction for uploaded course documents.

Format adapters turn PDF, Word and PowerPoint files into plain text plus
headings and sections. `DocumentExtractor` fetches a file by URL and routes
it to the right adapter by MIME type.

Example:
    >>> import httpx
    >>> from force_tracker.parsers import DocumentExtractor, DocumentFetcher
    >>>
    >>> async with httpx.AsyncClient() as http:
    ...     extractor = DocumentExtractor(DocumentFetcher(http))
    ...     document = await extractor.extract(url, "application/pdf")
"""

from .base import DocumentParser
from .config import FetcherConfig
from .docx_parser import DocxParser
from .extractor import DocumentExtractor, default_parsers
from .fetcher import DocumentFetcher
from .formats import DocumentFormat, detect_format
from .models import ExtractedDocument
from .pdf_parser import PdfParser
from .pptx_parser import PptxParser

__all__ = [
    # Routing
    "DocumentExtractor",
    "DocumentFormat",
    "detect_format",
    "default_parsers",
    # Fetching
    "DocumentFetcher",
    "FetcherConfig",
    # Adapters
    "DocumentParser",
    "PdfParser",
    "DocxParser",
    "PptxParser",
    # Types
    "ExtractedDocument",
]
