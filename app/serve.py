"""
serve.py – Launch the Cotizador admin service under uvicorn.

This is the production and local-dev entry point:
  python serve.py

Host and port come from config (``HOST`` / ``PORT``).  TLS is terminated by
the hosting platform in front of this process.
"""

import asyncio
import logging
import sys

import uvicorn

from config import DEFAULT_HOST, DEFAULT_PORT, load_config

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
log = logging.getLogger(__name__)


async def _serve() -> None:
    try:
        server_cfg = load_config()["server"]
    except (RuntimeError, OSError, ValueError) as exc:
        # Still serve: pre-flight and /health work without provider credentials.
        log.error("Configuration incomplete: %s", exc)
        server_cfg = {"host": DEFAULT_HOST, "port": DEFAULT_PORT}

    config = uvicorn.Config(
        "main:app",
        host=server_cfg["host"],
        port=server_cfg["port"],
        log_level="info",
        access_log=True,
    )
    log.info("Cotizador admin service starting on http://%s:%s", server_cfg["host"], server_cfg["port"])
    await uvicorn.Server(config).serve()


if __name__ == "__main__":
    try:
        asyncio.run(_serve())
    except KeyboardInterrupt:
        sys.exit(0)
