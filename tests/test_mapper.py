"""Tests for the end-to-end site-map pipeline (crawl → filter → graph).

The scenario tests use the in-memory ``fake_site`` fetcher.  One test runs
the real httpx fetcher behind ``respx`` to cover the default collaborators.
"""

from __future__ import annotations

import httpx
import pytest
import respx

from flowmap.errors import EmptyResult, InvalidInput
from flowmap.mapper import SiteMap, map_site

SEED = "https://example.com/"


def _html(title: str, *hrefs: str) -> str:
    anchors = "".join(f'<a href="{h}">{h}</a>' for h in hrefs)
    return f"<html><head><title>{title}</title></head><body>{anchors}</body></html>"


def _url(path: str) -> str:
    return f"https://example.com{path}"


def _edges(site: SiteMap) -> list[tuple[str, str]]:
    return [(e.source, e.target) for e in site.graph.edges]


class TestMapSiteScenarios:
    async def test_seed_without_links(self, fake_site) -> None:
        site = await map_site(SEED, fetcher=fake_site({SEED: _html("Home")}).fetch)

        assert len(site.graph.nodes) == 1
        assert site.graph.edges == []
        assert site.crawled_count == 1

    async def test_back_links_to_seed_are_boilerplate(self, fake_site) -> None:
        pages = {
            SEED: _html("Home", "/a", "/b"),
            _url("/a"): _html("A", "/"),
            _url("/b"): _html("B", "/"),
        }
        site = await map_site(SEED, threshold=0.5, fetcher=fake_site(pages).fetch)

        assert site.boilerplate == frozenset({SEED})
        assert _edges(site) == [(SEED, _url("/a")), (SEED, _url("/b"))]

    async def test_default_threshold_on_three_pages(self, fake_site) -> None:
        # Each of /a and /b is linked from 1 of 3 pages (0.33 > 0.3), so every
        # edge is suppressed; the nodes remain.
        pages = {
            SEED: _html("Home", "/a", "/b"),
            _url("/a"): _html("A", "/"),
            _url("/b"): _html("B", "/"),
        }
        site = await map_site(SEED, fetcher=fake_site(pages).fetch)

        assert [n.id for n in site.graph.nodes] == [SEED, _url("/a"), _url("/b")]
        assert site.graph.edges == []

    async def test_failed_page_has_no_node_and_no_edge(self, fake_site) -> None:
        pages = {
            SEED: _html("Home", "/ok", "/broken"),
            _url("/ok"): _html("OK"),
        }
        site = await map_site(SEED, threshold=1.0, fetcher=fake_site(pages).fetch)

        node_ids = [n.id for n in site.graph.nodes]
        assert _url("/broken") not in node_ids
        assert all(e.target != _url("/broken") for e in site.graph.edges)
        assert [f.url for f in site.failures] == [_url("/broken")]

    async def test_max_depth_zero(self, fake_site) -> None:
        pages = {SEED: _html("Home", "/a", "/b", "/c")}
        fake = fake_site(pages)
        site = await map_site(SEED, 0, fetcher=fake.fetch)

        assert fake.calls == [SEED]
        assert site.crawled_count == 1
        assert site.graph.edges == []

    async def test_duplicate_hrefs_count_once(self, fake_site) -> None:
        pages = {
            SEED: _html("Home", "/a", "/a", "/a?x=1"),
            _url("/a"): _html("A"),
        }
        site = await map_site(SEED, threshold=0.5, fetcher=fake_site(pages).fetch)

        # /a: 1 of 2 pages, ratio 0.5, not > 0.5
        assert site.boilerplate == frozenset()
        assert _edges(site) == [(SEED, _url("/a"))]


class TestMapSiteErrors:
    async def test_missing_seed_raises_invalid_input(self, fake_site) -> None:
        with pytest.raises(InvalidInput):
            await map_site(None, fetcher=fake_site({}).fetch)

    async def test_nothing_fetched_raises_empty_result(self, fake_site) -> None:
        with pytest.raises(EmptyResult) as excinfo:
            await map_site(SEED, fetcher=fake_site({}).fetch)

        assert excinfo.value.result.crawled_count == 0
        assert [f.url for f in excinfo.value.result.failures] == [SEED]


class TestMapSitePayload:
    async def test_payload_shape(self, fake_site) -> None:
        pages = {SEED: _html("Home", "/a"), _url("/a"): _html("A")}
        site = await map_site(SEED, threshold=1.0, fetcher=fake_site(pages).fetch)
        payload = site.to_payload()

        assert payload["crawledCount"] == 2
        assert payload["nodes"][0] == {
            "id": SEED,
            "label": "Home",
            "position": {"x": 0.0, "y": 0.0},
        }
        assert payload["edges"] == [
            {"id": f"{SEED}->{_url('/a')}", "source": SEED, "target": _url("/a")}
        ]


class TestMapSiteOverHttp:
    async def test_default_fetcher_and_extractor(self) -> None:
        with respx.mock:
            respx.get(SEED).mock(
                return_value=httpx.Response(200, text=_html("Home", "/about", "/gone"))
            )
            respx.get(_url("/about")).mock(
                return_value=httpx.Response(200, text=_html("About us"))
            )
            respx.get(_url("/gone")).mock(return_value=httpx.Response(500))
            site = await map_site(SEED, threshold=1.0)

        assert [n.label for n in site.graph.nodes] == ["Home", "About us"]
        assert _edges(site) == [(SEED, _url("/about"))]
        assert site.failures[0].reason == "HTTP 500"

    async def test_unfetchable_link_is_recorded_as_failure(self) -> None:
        with respx.mock:
            respx.get(SEED).mock(
                return_value=httpx.Response(200, text=_html("Home", "/ok", "/bad\x01path"))
            )
            respx.get(_url("/ok")).mock(return_value=httpx.Response(200, text=_html("OK")))
            site = await map_site(SEED, threshold=1.0)

        assert [n.label for n in site.graph.nodes] == ["Home", "OK"]
        assert _edges(site) == [(SEED, _url("/ok"))]
        assert [f.url for f in site.failures] == [_url("/bad\x01path")]
        assert "invalid URL" in site.failures[0].reason
