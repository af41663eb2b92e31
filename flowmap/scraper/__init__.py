"""Scraper package — page fetch & link extraction."""

from flowmap.scraper.extractor import extract_links
from flowmap.scraper.fetcher import fetch_page
from flowmap.scraper.models import ExtractedLinks, RawPage

__all__ = ["fetch_page", "extract_links", "RawPage", "ExtractedLinks"]
