"""Data models for the scraper collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass
class ExtractedLinks:
    """Title and raw anchor targets pulled out of a :class:`RawPage`.

    ``hrefs`` keeps document order and duplicates; deduplication happens
    after normalisation in the crawl engine.
    """

    title: str
    hrefs: List[str] = field(default_factory=list)
