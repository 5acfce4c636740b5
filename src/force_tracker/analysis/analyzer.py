# src/force_tracker/analysis/analyzer.py

import logging
from time import monotonic

from force_tracker.observability import names
from force_tracker.observability.base import MetricsHook, NoOpMetricsHook

from .extractors import (
    extract_concepts,
    extract_definitions,
    extract_examples,
    extract_facts,
    extract_headings,
    extract_key_points,
    extract_processes,
    extract_sections,
    extract_statistics,
    extract_title,
    extract_vocabulary,
)
from .models import MAX_HEADINGS, MAX_SECTIONS, ParsedContent
from .text import unique_capped

logger = logging.getLogger(__name__)

# Generic study vocabulary surfaced as topics when it appears in the text.
TOPIC_KEYWORDS = (
    "algorithm",
    "method",
    "technique",
    "process",
    "system",
    "concept",
    "principle",
    "theory",
    "practice",
    "application",
    "strategy",
    "approach",
    "framework",
    "model",
    "structure",
)


def analyze(
    text: str,
    *,
    headings: list[str] | None = None,
    sections: list[str] | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> ParsedContent:
    """Run every extractor over `text` and assemble a ParsedContent.

    Args:
        text: Plain document text.
        headings: Headings already detected by the extractor (e.g. from
            font metrics). Detected from the text lines when omitted.
        sections: Section bodies already split by the extractor. Split on
            the headings when omitted.
        metrics_hook: Optional metrics hook for observability.

    Returns:
        A ParsedContent whose lists are deduplicated and capped.
        Identical input always yields an identical result.
    """
    start = monotonic()

    found_headings = headings if headings is not None else extract_headings(text)
    found_sections = (
        sections if sections is not None else extract_sections(text, found_headings)
    )
    capped_headings = unique_capped(found_headings, MAX_HEADINGS)

    content = ParsedContent(
        text=text,
        title=extract_title(text, capped_headings),
        headings=capped_headings,
        key_points=extract_key_points(text),
        concepts=extract_concepts(text),
        definitions=extract_definitions(text),
        facts=extract_facts(text),
        examples=extract_examples(text),
        sections=unique_capped(found_sections, MAX_SECTIONS),
        vocabulary=extract_vocabulary(text),
        processes=extract_processes(text),
        statistics=extract_statistics(text),
    )

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.ANALYSIS_DURATION, elapsed_ms)
    metrics_hook.record_gauge(names.ANALYSIS_TEXT_LENGTH, len(text))

    logger.info(
        "Analyzed %d characters in %.0fms: %s", len(text), elapsed_ms, content.counts()
    )
    return content


def extract_key_topics(content: ParsedContent) -> list[str]:
    """Headings, key points and study keywords present in the text."""
    lowered = content.text.lower()
    keywords = [keyword for keyword in TOPIC_KEYWORDS if keyword in lowered]
    topics = [*content.headings, *content.key_points, *keywords]
    return list(dict.fromkeys(topics))
