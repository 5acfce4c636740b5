from unittest.mock import MagicMock

from force_tracker.analysis import ParsedContent, analyze, extract_key_topics
from force_tracker.analysis.models import (
    MAX_CONCEPTS,
    MAX_DEFINITIONS,
    MAX_EXAMPLES,
    MAX_FACTS,
    MAX_HEADINGS,
    MAX_KEY_POINTS,
    MAX_PROCESSES,
    MAX_SECTIONS,
    MAX_STATISTICS,
    MAX_VOCABULARY,
)

ML_TEXT = (
    "Machine Learning is a method of data analysis. "
    "For example, classification and regression are common tasks."
)

CAPS = {
    "headings": MAX_HEADINGS,
    "key_points": MAX_KEY_POINTS,
    "concepts": MAX_CONCEPTS,
    "definitions": MAX_DEFINITIONS,
    "facts": MAX_FACTS,
    "examples": MAX_EXAMPLES,
    "sections": MAX_SECTIONS,
    "vocabulary": MAX_VOCABULARY,
    "processes": MAX_PROCESSES,
    "statistics": MAX_STATISTICS,
}


def _long_document() -> str:
    lines = []
    for i in range(40):
        lines.append(f"Chapter {i}: Topic Number {i}")
        lines.append(
            f"Concept{chr(65 + i % 26)}x is a principle explained in lesson {i}. "
            f"About {i}% of learners use it, such as students and teachers. "
            f"Step {i} involves careful organization and repetition. "
            f"The average score was {i} out of {i + 10} points in {1900 + i}."
        )
    return "\n".join(lines)


class TestAnalyze:
    def test_machine_learning_paragraph(self) -> None:
        content = analyze(ML_TEXT)

        assert "Machine Learning" in content.concepts
        assert "Machine Learning: a method of data analysis" in content.definitions
        assert content.examples == [
            "For example, classification and regression are common tasks"
        ]
        assert len(content.key_points) == 2
        assert content.title == "Course Content"

    def test_is_deterministic(self) -> None:
        assert analyze(ML_TEXT) == analyze(ML_TEXT)

    def test_every_list_is_capped_and_unique(self) -> None:
        content = analyze(_long_document())

        for name, cap in CAPS.items():
            values = getattr(content, name)
            assert len(values) <= cap, name
            assert len(values) == len(set(values)), name

        assert len(content.headings) == MAX_HEADINGS
        assert len(content.key_points) == MAX_KEY_POINTS

    def test_empty_text(self) -> None:
        content = analyze("")

        assert content.title == "Course Content"
        assert all(count == 0 for count in content.counts().values())

    def test_uses_supplied_headings_and_sections(self) -> None:
        content = analyze(
            "body text only", headings=["Intro", "Intro", "Basics"], sections=["a", "b"]
        )

        assert content.headings == ["Intro", "Basics"]
        assert content.title == "Intro"
        assert content.sections == ["a", "b"]

    def test_supplied_headings_are_capped(self) -> None:
        headings = [f"Heading {i}" for i in range(20)]

        content = analyze("text", headings=headings)

        assert content.headings == headings[:MAX_HEADINGS]

    def test_sections_cap_at_ten(self) -> None:
        text = "\n".join(f"Part {i}\nbody line number {i} here" for i in range(12))

        content = analyze(text)

        assert content.sections == [f"body line number {i} here" for i in range(10)]

    def test_supplied_sections_are_capped(self) -> None:
        sections = [f"Section body {i}" for i in range(12)]

        content = analyze("text", sections=sections)

        assert content.sections == sections[:MAX_SECTIONS]

    def test_records_metrics(self) -> None:
        metrics_hook = MagicMock()

        analyze(ML_TEXT, metrics_hook=metrics_hook)

        metrics_hook.record_latency.assert_called_once()
        assert metrics_hook.record_latency.call_args[0][0] == "analysis_duration"
        metrics_hook.record_gauge.assert_called_once_with(
            "analysis_text_length", len(ML_TEXT)
        )


def test_extract_key_topics() -> None:
    content = ParsedContent(
        text="We use an algorithm and a model.",
        headings=["Intro"],
        key_points=["Point"],
    )

    assert extract_key_topics(content) == ["Intro", "Point", "algorithm", "model"]
