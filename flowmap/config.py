"""Centralised settings for the Flow Mapper backend.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Crawl bounds
    # ------------------------------------------------------------------
    max_pages: int = field(
        default_factory=lambda: int(os.environ.get("FLOWMAP_MAX_PAGES", "50"))
    )
    default_max_depth: int = field(
        default_factory=lambda: int(os.environ.get("FLOWMAP_MAX_DEPTH", "2"))
    )

    # ------------------------------------------------------------------
    # Fetcher
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("FLOWMAP_REQUEST_TIMEOUT", "5.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "FLOWMAP_USER_AGENT",
            "Mozilla/5.0 (compatible; FlowMapper-Bot/1.0)",
        )
    )

    # ------------------------------------------------------------------
    # Noise filter / graph
    # ------------------------------------------------------------------
    boilerplate_threshold: float = field(
        default_factory=lambda: float(
            os.environ.get("FLOWMAP_BOILERPLATE_THRESHOLD", "0.3")
        )
    )
    label_max_length: int = field(
        default_factory=lambda: int(os.environ.get("FLOWMAP_LABEL_MAX_LENGTH", "30"))
    )

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    node_width: int = field(
        default_factory=lambda: int(os.environ.get("FLOWMAP_NODE_WIDTH", "172"))
    )
    node_height: int = field(
        default_factory=lambda: int(os.environ.get("FLOWMAP_NODE_HEIGHT", "36"))
    )


# Module-level singleton — import this everywhere:
#   from flowmap.config import settings
settings = Settings()
