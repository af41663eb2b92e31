"""Flow Mapper CLI — entry-point for crawling and serving.

Usage:
    flowmap --help

Commands:
    crawl   → crawl a site and print its navigation graph
    serve   → run the HTTP API with uvicorn
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer

from flowmap.config import settings
from flowmap.errors import EmptyResult, InvalidInput
from flowmap.graph.layout import layout_graph
from flowmap.mapper import map_site
from flowmap_cli.rendering import render_list, render_tree

app = typer.Typer(
    name="flowmap",
    help="Flow Mapper CLI.",
    no_args_is_help=True,
)


@app.command("crawl")
def crawl_cmd(
    url: str = typer.Argument(..., help="Seed URL (e.g. https://example.com)."),
    max_depth: int = typer.Option(
        settings.default_max_depth, "--max-depth", help="Maximum link hops from the seed."
    ),
    max_pages: int = typer.Option(
        settings.max_pages, "--max-pages", help="Maximum number of pages to crawl."
    ),
    threshold: float = typer.Option(
        settings.boilerplate_threshold,
        "--threshold",
        min=0.0,
        max=1.0,
        help="Links on more than this share of pages are treated as boilerplate.",
    ),
    timeout: float = typer.Option(
        settings.request_timeout, "--timeout", help="Per-page timeout in seconds."
    ),
    format: str = typer.Option("tree", "--format", help="Output format: tree | list | json"),
    layout: bool = typer.Option(False, "--layout", help="Compute node positions (json only)."),
    out: Optional[Path] = typer.Option(
        None, "--out", help="Write the output to this file instead of stdout."
    ),
) -> None:
    """Crawl URL and print the page-to-page navigation graph."""
    if format not in ("tree", "list", "json"):
        typer.echo(f"[crawl] Unknown format {format!r}. Use: tree | list | json")
        raise typer.Exit(2)
    if layout and format != "json":
        typer.echo("[crawl] --layout only applies to --format json")
        raise typer.Exit(2)

    typer.echo(f"[crawl] Crawling {url!r} (depth={max_depth}, max pages={max_pages}) …")
    try:
        site = asyncio.run(
            map_site(
                url,
                max_depth,
                threshold=threshold,
                max_pages=max_pages,
                timeout=timeout,
            )
        )
    except InvalidInput as exc:
        typer.echo(f"[crawl] Invalid input: {exc}")
        raise typer.Exit(2)
    except EmptyResult as exc:
        typer.echo("[crawl] No pages found. Check the URL.")
        for failure in exc.result.failures:
            typer.echo(f"  {failure.url}: {failure.reason}")
        raise typer.Exit(1)

    if format == "tree":
        text = render_tree(site.graph, site.start_url)
    elif format == "list":
        text = render_list(site)
    else:
        if layout:
            site.graph = layout_graph(site.graph)
        text = json.dumps(site.to_payload(), ensure_ascii=False, indent=2)

    if out is None:
        typer.echo(text)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    typer.echo(f"[crawl] Graph written to {out}")


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind."),
    port: int = typer.Option(8000, help="Port to listen on."),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes."),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    uvicorn.run("flowmap.api.app:app", host=host, port=port, reload=reload)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
