# src/force_tracker/parsers/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class FetcherConfig:
    """Configuration for fetching uploaded documents."""

    timeout: float = 30.0
    follow_redirects: bool = True
