"""Shared fixtures.

``fake_site`` turns a ``{url: html}`` mapping into an in-memory page fetcher
so crawl tests never touch the network.  URLs missing from the mapping fail
with a 404 :class:`~flowmap.errors.FetchError`.
"""

from __future__ import annotations

from typing import Callable

import pytest

from flowmap.errors import FetchError
from flowmap.scraper.models import RawPage


class FakeSite:
    def __init__(self, pages: dict[str, str]) -> None:
        self.pages = pages
        self.calls: list[str] = []

    async def fetch(self, url: str, timeout: float) -> RawPage:
        self.calls.append(url)
        if url not in self.pages:
            raise FetchError(url, "HTTP 404", status_code=404)
        return RawPage(url=url, html=self.pages[url], status_code=200)


@pytest.fixture()
def fake_site() -> Callable[[dict[str, str]], FakeSite]:
    return FakeSite
