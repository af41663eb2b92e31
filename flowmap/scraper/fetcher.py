"""Async HTTP page fetcher."""

from __future__ import annotations

import httpx

from flowmap.config import settings
from flowmap.errors import FetchError
from flowmap.scraper.models import RawPage


def _default_headers() -> dict[str, str]:
    return {"User-Agent": settings.user_agent}


async def fetch_page(url: str, timeout: float) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Every failure mode (connection error, timeout, 4xx/5xx status) is
    reported as :class:`~flowmap.errors.FetchError` so the crawl engine has a
    single exception type to absorb.

    Args:
        url: Absolute URL to GET.
        timeout: Overall request timeout in seconds.

    Raises:
        FetchError: If the page could not be retrieved.
    """
    async with httpx.AsyncClient(
        headers=_default_headers(),
        timeout=timeout,
        follow_redirects=True,
    ) as client:
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise FetchError(url, f"timed out after {timeout}s") from exc
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            raise FetchError(url, f"HTTP {status}", status_code=status) from exc
        except httpx.HTTPError as exc:
            raise FetchError(url, f"{type(exc).__name__}: {exc}") from exc
        except httpx.InvalidURL as exc:
            # Not an HTTPError; raised while building the request.
            raise FetchError(url, f"invalid URL: {exc}") from exc

    return RawPage(url=url, html=response.text, status_code=response.status_code)
