"""
Cotizador admin service - application entry point.

Backend glue for the gigantografía quoting app.  Exposes the admin-only
user-provisioning endpoint used by the mobile client.

All logic lives in:
  config.py                   - environment / options-file settings
  lifespan.py                 - startup config check
  cors.py                     - shared cross-origin headers
  schemas.py                  - request bodies
  auth_admin.py               - Supabase Auth admin API helpers
  endpoints/health.py         - GET /health
  endpoints/create_user.py    - OPTIONS/POST /create-user-by-admin
"""

import logging

from fastapi import FastAPI

from endpoints import create_user, health
from lifespan import lifespan

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)

app = FastAPI(title="Cotizador Admin", lifespan=lifespan)

app.include_router(health.router)
app.include_router(create_user.router)
