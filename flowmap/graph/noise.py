"""Boilerplate detection over a crawl's link set.

A link that shows up on a large share of the crawled pages (site header,
footer, sidebar) says little about how a user moves through the site.  Such
links are collected into a *boilerplate set* which the graph builder uses to
suppress edges; the pages themselves still become nodes.
"""

from __future__ import annotations

from collections import Counter
from typing import FrozenSet, Iterable, Optional

from flowmap.config import settings
from flowmap.crawl.models import Page


def link_frequency(pages: Iterable[Page]) -> Counter:
    """Count, for every link, how many distinct pages contain it."""
    counts: Counter = Counter()
    for page in pages:
        counts.update(set(page.links))
    return counts


def compute_boilerplate(
    pages: list[Page],
    threshold: Optional[float] = None,
) -> FrozenSet[str]:
    """Return links whose page ratio ``count / len(pages)`` exceeds *threshold*.

    The comparison is strict, so with the default ``0.3`` a link must appear
    on more than 30% of pages.  An empty crawl yields an empty set.
    """
    if threshold is None:
        threshold = settings.boilerplate_threshold
    total = len(pages)
    if total == 0:
        return frozenset()
    return frozenset(
        link for link, count in link_frequency(pages).items() if count / total > threshold
    )
