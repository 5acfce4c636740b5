# src/force_tracker/parsers/models.py

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ExtractedDocument:
    """Plain text plus the structure a format adapter could recover.

    Headings and sections are in document order and not yet deduplicated;
    the content analyzer caps them.
    """

    text: str
    headings: list[str] = field(default_factory=list)
    sections: list[str] = field(default_factory=list)
    metadata: dict = field(default_factory=dict)
