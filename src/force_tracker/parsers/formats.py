# src/force_tracker/parsers/formats.py

from enum import Enum
from pathlib import PurePosixPath

from force_tracker.errors import UnsupportedFormatError


class DocumentFormat(str, Enum):
    """Document formats the extractor can read."""

    PDF = "pdf"
    WORD = "docx"
    POWERPOINT = "pptx"


_MIME_MARKERS: list[tuple[str, DocumentFormat]] = [
    ("pdf", DocumentFormat.PDF),
    ("wordprocessingml", DocumentFormat.WORD),
    ("presentationml", DocumentFormat.POWERPOINT),
]

# Binary (OLE2) Office types; python-docx and python-pptx only read OOXML.
_LEGACY_MIME_MARKERS = ("msword", "ms-powerpoint")
_LEGACY_EXTENSIONS = (".doc", ".ppt")

_EXTENSIONS = {
    ".pdf": DocumentFormat.PDF,
    ".docx": DocumentFormat.WORD,
    ".pptx": DocumentFormat.POWERPOINT,
}


def _suffix(filename: str | None) -> str:
    if not filename:
        return ""
    return PurePosixPath(filename.split("?", 1)[0]).suffix.lower()


def detect_format(mime_type: str | None, filename: str | None = None) -> DocumentFormat:
    """Route a MIME type (or, failing that, a file name) to a format.

    Legacy `.doc`/`.ppt` uploads are refused up front. A legacy MIME type
    is only overridden by an explicit `.docx`/`.pptx` file name, since
    some browsers label OOXML decks `application/vnd.ms-powerpoint`.

    Raises:
        UnsupportedFormatError: If neither identifies PDF, Word or PowerPoint,
            or the upload is a legacy binary Office file.
    """
    lowered = (mime_type or "").lower()
    suffix = _suffix(filename)

    for marker, document_format in _MIME_MARKERS:
        if marker in lowered:
            return document_format

    if any(marker in lowered for marker in _LEGACY_MIME_MARKERS):
        if suffix in (".docx", ".pptx"):
            return _EXTENSIONS[suffix]
        raise UnsupportedFormatError(
            f"Legacy binary Office format is not supported: {mime_type!r}"
        )

    if suffix in _LEGACY_EXTENSIONS:
        raise UnsupportedFormatError(
            f"Legacy binary Office format is not supported: {filename!r}"
        )
    if suffix in _EXTENSIONS:
        return _EXTENSIONS[suffix]

    raise UnsupportedFormatError(f"Unsupported document type: {mime_type!r}")
