"""Crawl endpoint.

Routes
------
POST /crawl    Body: {"startUrl": "https://...", "maxDepth": 2}    → map_site

A crawl that finds nothing is not an error: it returns ``200`` with empty
``nodes``/``edges`` and ``crawledCount == 0`` so clients can show a
"no pages found" message.  A missing or unusable ``startUrl`` is a ``400``.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from flowmap.errors import EmptyResult, InvalidInput
from flowmap.graph.layout import layout_graph
from flowmap.mapper import map_site

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class CrawlRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_url: Optional[str] = Field(default=None, alias="startUrl")
    max_depth: Optional[int] = Field(default=None, alias="maxDepth", ge=0)
    threshold: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    layout: bool = False


class PositionResponse(BaseModel):
    x: float
    y: float


class NodeResponse(BaseModel):
    id: str
    label: str
    position: PositionResponse


class EdgeResponse(BaseModel):
    id: str
    source: str
    target: str


class CrawlResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    nodes: list[NodeResponse]
    edges: list[EdgeResponse]
    crawled_count: int = Field(alias="crawledCount")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _empty_response() -> dict[str, Any]:
    return {"nodes": [], "edges": [], "crawledCount": 0}


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("", response_model=CrawlResponse, response_model_by_alias=True)
async def crawl_endpoint(body: CrawlRequest) -> dict[str, Any]:
    """Crawl a site from ``startUrl`` and return its navigation graph."""
    try:
        site = await map_site(body.start_url, body.max_depth, threshold=body.threshold)
    except InvalidInput as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except EmptyResult:
        return _empty_response()

    if body.layout:
        site.graph = layout_graph(site.graph)
    return site.to_payload()
