"""Exception types raised by the crawl pipeline.

Only :class:`InvalidInput` ever escapes :func:`~flowmap.crawl.engine.crawl`.
:class:`FetchError` and :class:`NormalizationError` are raised by the
collaborators and absorbed per page / per link.  :class:`EmptyResult` is
raised by :func:`~flowmap.mapper.map_site` when nothing could be crawled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from flowmap.crawl.models import CrawlResult


class FlowMapError(Exception):
    """Base class for every error raised by this package."""


class InvalidInput(FlowMapError, ValueError):
    """The seed URL (or a crawl bound) is missing or unusable."""


class FetchError(FlowMapError):
    """A single page could not be fetched (network error, timeout, non-2xx)."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None) -> None:
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"{url}: {reason}")


class NormalizationError(FlowMapError, ValueError):
    """A link could not be resolved to a same-host page URL."""


class EmptyResult(FlowMapError):
    """The crawl finished without a single successfully fetched page."""

    def __init__(self, result: "CrawlResult") -> None:
        self.result = result
        super().__init__(f"No pages found starting from {result.start_url}")
