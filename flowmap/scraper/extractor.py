"""Link extraction: turns a :class:`RawPage` into :class:`ExtractedLinks`."""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup

from flowmap.scraper.models import ExtractedLinks, RawPage


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _extract_title(soup: BeautifulSoup) -> str:
    """Return the stripped text of the first ``<title>`` tag, or empty string."""
    if soup.title is None:
        return ""
    return soup.title.get_text().strip()


def _extract_hrefs(soup: BeautifulSoup) -> List[str]:
    """Return every ``<a href>`` value in document order.

    Anchors without an ``href`` attribute (or with an empty one) are skipped.
    Duplicates are kept.
    """
    hrefs: List[str] = []
    for anchor in soup.find_all("a"):
        href = anchor.get("href")
        if href:
            hrefs.append(href)
    return hrefs


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_links(raw: RawPage) -> ExtractedLinks:
    """Parse *raw* and return its title and raw anchor targets."""
    soup = BeautifulSoup(raw.html, "html.parser")
    return ExtractedLinks(title=_extract_title(soup), hrefs=_extract_hrefs(soup))
