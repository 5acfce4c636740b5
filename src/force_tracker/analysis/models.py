# src/force_tracker/analysis/models.py

from dataclasses import asdict, dataclass, field

MAX_HEADINGS = 15
MAX_KEY_POINTS = 10
MAX_CONCEPTS = 12
MAX_DEFINITIONS = 10
MAX_FACTS = 8
MAX_EXAMPLES = 6
MAX_SECTIONS = 10
MAX_VOCABULARY = 15
MAX_PROCESSES = 8
MAX_STATISTICS = 6

DEFAULT_TITLE = "Course Content"


@dataclass(frozen=True)
class ParsedContent:
    """Categorized excerpts mined from one document.

    Produced once per upload and consumed by the quiz prompt builder.
    Every list is duplicate-free and keeps the first items found
    scanning the text left to right.
    """

    text: str
    title: str | None = None
    headings: list[str] = field(default_factory=list)
    key_points: list[str] = field(default_factory=list)
    concepts: list[str] = field(default_factory=list)
    definitions: list[str] = field(default_factory=list)
    facts: list[str] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)
    sections: list[str] = field(default_factory=list)
    vocabulary: list[str] = field(default_factory=list)
    processes: list[str] = field(default_factory=list)
    statistics: list[str] = field(default_factory=list)

    def counts(self) -> dict[str, int]:
        """Number of items per category, for logging and progress details."""
        return {
            name: len(value)
            for name, value in asdict(self).items()
            if isinstance(value, list)
        }
