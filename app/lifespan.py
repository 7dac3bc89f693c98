"""
FastAPI lifespan – checks configuration on startup.

Requests read their configuration themselves, so a missing secret here only
warns; the service still starts and answers pre-flight and health checks.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config import load_config

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ── Config check (no secrets logged) ──────────────────────────────────
    try:
        cfg = load_config()
    except Exception as exc:
        log.warning("Configuration incomplete – user creation will fail until fixed: %s", exc)
    else:
        log.info("Supabase URL       : %s", cfg["supabase"]["url"])
        log.info("Service-role key   : %s", "set" if cfg["supabase"]["service_role_key"] else "(not set)")
        log.info("Supabase timeout   : %ss", cfg["supabase"]["timeout"])
        log.info("CORS allow origin  : %s", cfg["cors"]["allow_origin"])

    yield

    # ── Shutdown ───────────────────────────────────────────────────────────
    log.info("Cotizador admin service stopped")
