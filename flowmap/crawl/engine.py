"""Breadth-first crawl engine.

``crawl`` wires the frontier, the URL normaliser and the two scraper
collaborators together:

    pop target → mark visited → fetch → extract → normalise links → enqueue

One fetch is awaited at a time.  A page that fails to fetch or parse is
recorded in :attr:`CrawlResult.failures` and skipped; only an unusable seed
(or crawl bound) raises.
"""

from __future__ import annotations

from typing import Awaitable, Callable, List, Optional

from flowmap.config import settings
from flowmap.crawl.frontier import Frontier
from flowmap.crawl.models import CrawlFailure, CrawlResult, CrawlTarget, Page
from flowmap.crawl.normalizer import normalize_url
from flowmap.errors import FetchError, InvalidInput
from flowmap.scraper.extractor import extract_links
from flowmap.scraper.fetcher import fetch_page
from flowmap.scraper.models import ExtractedLinks, RawPage

Fetcher = Callable[[str, float], Awaitable[RawPage]]
Extractor = Callable[[RawPage], ExtractedLinks]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _validate_seed(start_url: Optional[str]) -> str:
    """Return the canonical seed URL or raise :class:`InvalidInput`."""
    if not start_url or not start_url.strip():
        raise InvalidInput("Start URL is required")
    seed = normalize_url(start_url, start_url)
    if seed is None:
        raise InvalidInput(f"Start URL must be an absolute http(s) URL: {start_url!r}")
    return seed


def _page_links(hrefs: List[str], start_url: str, page_url: str) -> tuple[str, ...]:
    """Normalise *hrefs* against the seed, dropping rejects and self-loops.

    Resolution is always relative to *start_url*, not *page_url*, so a
    relative href on a nested page resolves against the seed's path.
    """
    seen: set[str] = set()
    links: List[str] = []
    for href in hrefs:
        link = normalize_url(href, start_url)
        if link is None or link == page_url or link in seen:
            continue
        seen.add(link)
        links.append(link)
    return tuple(links)


def _record_failure(result: CrawlResult, target: CrawlTarget, reason: str) -> None:
    print(f"[crawl] Failed to crawl {target.url}: {reason}")
    result.failures.append(CrawlFailure(url=target.url, depth=target.depth, reason=reason))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

async def crawl(
    start_url: Optional[str],
    max_depth: Optional[int] = None,
    *,
    max_pages: Optional[int] = None,
    timeout: Optional[float] = None,
    fetcher: Optional[Fetcher] = None,
    extractor: Optional[Extractor] = None,
) -> CrawlResult:
    """Crawl same-host pages breadth-first from *start_url*.

    Args:
        start_url: Seed URL; must be an absolute http(s) URL.
        max_depth: Maximum number of link hops from the seed.  Defaults to
            ``settings.default_max_depth``.
        max_pages: Hard ceiling on the number of stored pages.  Defaults to
            ``settings.max_pages``.
        timeout: Per-fetch timeout in seconds.  Defaults to
            ``settings.request_timeout``.
        fetcher: ``async (url, timeout) -> RawPage``; defaults to
            :func:`~flowmap.scraper.fetcher.fetch_page`.
        extractor: ``(RawPage) -> ExtractedLinks``; defaults to
            :func:`~flowmap.scraper.extractor.extract_links`.

    Returns:
        A :class:`CrawlResult` with pages in visitation order.

    Raises:
        InvalidInput: If the seed or a bound is unusable.
    """
    max_depth = settings.default_max_depth if max_depth is None else max_depth
    max_pages = settings.max_pages if max_pages is None else max_pages
    timeout = settings.request_timeout if timeout is None else timeout
    fetcher = fetcher or fetch_page
    extractor = extractor or extract_links

    seed = _validate_seed(start_url)
    if max_depth < 0:
        raise InvalidInput(f"max_depth must be >= 0, got {max_depth}")
    if max_pages < 1:
        raise InvalidInput(f"max_pages must be >= 1, got {max_pages}")

    base = start_url.strip()
    frontier = Frontier(seed)
    result = CrawlResult(start_url=seed)

    while frontier and len(result.pages) < max_pages:
        target = frontier.pop()
        if frontier.is_visited(target.url) or target.depth > max_depth:
            continue
        frontier.mark_visited(target.url)

        try:
            raw = await fetcher(target.url, timeout)
        except FetchError as exc:
            _record_failure(result, target, exc.reason)
            continue

        try:
            extracted = extractor(raw)
        except Exception as exc:
            _record_failure(result, target, f"parse error: {exc}")
            continue

        links = _page_links(extracted.hrefs, base, target.url)
        for link in links:
            if not frontier.is_visited(link):
                frontier.push(link, target.depth + 1)

        result.pages.append(
            Page(url=target.url, title=extracted.title.strip() or target.url, links=links)
        )

    result.visited = frontier.visited
    print(
        f"[crawl] {seed}: {len(result.pages)} page(s) crawled, "
        f"{len(result.failures)} failure(s)."
    )
    return result
