# src/force_tracker/parsers/base.py

import io
from abc import ABC, abstractmethod
from typing import BinaryIO

from .models import ExtractedDocument

DocumentSource = bytes | BinaryIO


class DocumentParser(ABC):
    @abstractmethod
    def parse(self, source: DocumentSource) -> ExtractedDocument:
        """
        Parse a document into plain text plus headings and sections.

        Requirements:
        - Deterministic output for same input
        - Raises EmptyContentError when no usable text is found
        """
        raise NotImplementedError


def as_stream(source: DocumentSource) -> BinaryIO:
    """Wrap raw bytes so every parser library gets a seekable file object."""
    if isinstance(source, bytes | bytearray):
        return io.BytesIO(source)
    return source
