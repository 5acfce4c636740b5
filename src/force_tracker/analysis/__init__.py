# src/force_tracker/analysis/__init__.py

"""Content analysis for force-tracker.

A fixed, ordered pipeline of pure heuristic extractors over plain text.

Example:
    >>> from force_tracker.analysis import analyze
    >>>
    >>> content = analyze("Machine Learning is a method of data analysis.")
    >>> content.concepts
    ['Machine Learning']
"""

from .analyzer import analyze, extract_key_topics
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
from .models import ParsedContent
from .text import is_heading

__all__ = [
    # Pipeline
    "analyze",
    "extract_key_topics",
    # Types
    "ParsedContent",
    # Heuristics
    "is_heading",
    "extract_title",
    "extract_headings",
    "extract_sections",
    "extract_key_points",
    "extract_concepts",
    "extract_definitions",
    "extract_facts",
    "extract_examples",
    "extract_vocabulary",
    "extract_processes",
    "extract_statistics",
]
