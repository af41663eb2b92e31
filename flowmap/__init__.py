"""Flow Mapper — crawl a site and map its page-to-page navigation."""

from flowmap.errors import EmptyResult, FetchError, FlowMapError, InvalidInput
from flowmap.mapper import SiteMap, map_site

__version__ = "0.1.0"
__all__ = [
    "map_site",
    "SiteMap",
    "FlowMapError",
    "InvalidInput",
    "FetchError",
    "EmptyResult",
]
