"""
promohub.api.__main__ — Entry point for ``python -m promohub.api``
===================================================================

Wiring:
1. Load .env (secrets).
2. Load config.yaml (port and limits).
3. Configure logging.
4. Serve :data:`promohub.api.main.app` with uvicorn.
"""

from __future__ import annotations

import logging

import uvicorn
from dotenv import load_dotenv

from promohub.config import load_config

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s │ %(levelname)-8s │ %(name)s │ %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("promohub")


def main() -> None:
    """Bootstrap and run the PromoHub API."""
    load_dotenv()

    cfg = load_config()
    logger.info("Config loaded — Marketplace: %s", cfg.marketplace_name)

    uvicorn.run("promohub.api.main:app", host="0.0.0.0", port=cfg.api_port)


if __name__ == "__main__":
    main()
