"""
promohub.config — YAML Configuration Loader
============================================

Reads ``config.yaml`` for marketplace identity and the tunable limits of
the matching and search operations.  Secrets (``DATABASE_URL``,
``JWT_SECRET``) stay in the environment / ``.env``.

Usage::

    from promohub.config import load_config

    cfg = load_config()              # reads ./config.yaml by default
    print(cfg.marketplace_name)      # "PromoHubGo"
    print(cfg.suggestion_limit)      # 30
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from promohub.constants import (
    BOOSTED_MIN_PERCENT,
    CANDIDATE_FETCH_LIMIT,
    SUGGESTION_LIMIT,
)


# ---------------------------------------------------------------------------
# Typed settings object
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class PromoHubConfig:
    """Immutable configuration loaded from ``config.yaml``."""

    # Identity
    marketplace_name: str

    # API
    api_port: int = 8000

    # Campaign suggestions
    candidate_fetch_limit: int = CANDIDATE_FETCH_LIMIT  # influencers read per request
    suggestion_limit: int = SUGGESTION_LIMIT  # ranked rows returned

    # Creator search
    search_max_limit: int = 50
    boosted_min_percent: int = BOOSTED_MIN_PERCENT


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def load_config(path: str | Path = "config.yaml") -> PromoHubConfig:
    """Read *path* and return a :class:`PromoHubConfig` instance.

    Only ``marketplace_name`` is required; every limit falls back to its
    default when omitted.

    Raises
    ------
    FileNotFoundError
        If the YAML file doesn't exist.
    KeyError
        If a required key is missing from the YAML file.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path.resolve()}\n"
            "Hint: copy config.yaml.example → config.yaml and edit it."
        )

    with open(config_path, encoding="utf-8") as fh:
        raw: dict = yaml.safe_load(fh) or {}

    return PromoHubConfig(
        marketplace_name=raw["marketplace_name"],
        api_port=int(raw.get("api_port", 8000)),
        candidate_fetch_limit=int(raw.get("candidate_fetch_limit", CANDIDATE_FETCH_LIMIT)),
        suggestion_limit=int(raw.get("suggestion_limit", SUGGESTION_LIMIT)),
        search_max_limit=int(raw.get("search_max_limit", 50)),
        boosted_min_percent=int(raw.get("boosted_min_percent", BOOSTED_MIN_PERCENT)),
    )
