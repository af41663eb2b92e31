"""Crawl package — URL normalisation, frontier and the BFS engine."""

from flowmap.crawl.engine import crawl
from flowmap.crawl.frontier import Frontier
from flowmap.crawl.models import CrawlFailure, CrawlResult, CrawlTarget, Page
from flowmap.crawl.normalizer import normalize_url

__all__ = [
    "crawl",
    "normalize_url",
    "Frontier",
    "CrawlTarget",
    "CrawlFailure",
    "CrawlResult",
    "Page",
]
