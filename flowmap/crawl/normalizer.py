"""Canonicalise links and keep the crawl on the seed's host."""

from __future__ import annotations

from typing import Optional
from urllib.parse import urljoin, urlsplit

from flowmap.errors import NormalizationError

_DEFAULT_PORTS = {"http": 80, "https": 443}


def resolve_link(link: str, base: str) -> str:
    """Resolve *link* against *base* and return ``origin + path``.

    Query string, fragment and userinfo are dropped, so ``/p?x=1`` and
    ``/p?x=2#top`` resolve to the same URL.  Scheme and host are lower-cased
    and a default port is omitted.

    Raises:
        NormalizationError: If the link is malformed, is not http(s), or points
            to a different host than *base*.
    """
    try:
        base_host = urlsplit(base).hostname
        parts = urlsplit(urljoin(base, link.strip()))
        host = parts.hostname
        port = parts.port
    except ValueError as exc:
        raise NormalizationError(f"Malformed link {link!r}: {exc}") from exc

    scheme = parts.scheme.lower()
    if scheme not in _DEFAULT_PORTS:
        raise NormalizationError(f"Unsupported scheme in {link!r}")
    if not host:
        raise NormalizationError(f"No host in {link!r}")
    if host != base_host:
        raise NormalizationError(f"{link!r} leaves host {base_host!r}")

    if ":" in host:
        host = f"[{host}]"
    netloc = host if port in (None, _DEFAULT_PORTS[scheme]) else f"{host}:{port}"
    return f"{scheme}://{netloc}{parts.path or '/'}"


def normalize_url(link: str, base: str) -> Optional[str]:
    """Return the canonical same-host URL for *link*, or ``None`` to discard it."""
    try:
        return resolve_link(link, base)
    except NormalizationError:
        return None
