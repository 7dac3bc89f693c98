"""
config.py — Load settings for the Cotizador admin service.

Deployed, every setting comes from the environment (the hosting platform
injects ``SUPABASE_URL`` and ``SUPABASE_SERVICE_ROLE_KEY``).  For local
development set ``COTIZADOR_OPTIONS_PATH`` to a JSON file holding the same
settings under lower-case keys.  Environment variables
always win over the options file.

``load_config()`` is called on every request so a rotated secret takes
effect without a restart.  Nothing is cached.
"""

import json
import logging
import os
from typing import Any, Dict

log = logging.getLogger(__name__)

OPTIONS_PATH_ENV = "COTIZADOR_OPTIONS_PATH"

DEFAULT_TIMEOUT = 10.0
DEFAULT_ALLOW_ORIGIN = "*"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000


def _load_options() -> Dict[str, Any]:
    """Read the optional local-dev options file; empty dict when unset."""
    path = os.environ.get(OPTIONS_PATH_ENV, "").strip()
    if not path:
        return {}
    if not os.path.exists(path):
        log.warning("%s=%s not found – ignoring", OPTIONS_PATH_ENV, path)
        return {}
    with open(path) as fh:
        opts = json.load(fh)
    if not isinstance(opts, dict):
        raise RuntimeError(f"Options file {path!r} must contain a JSON object")
    return opts


def _setting(opts: Dict[str, Any], env_name: str, key: str, default: Any = "") -> Any:
    value = os.environ.get(env_name)
    if value is not None and value.strip():
        return value.strip()
    value = opts.get(key)
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    return value.strip() if isinstance(value, str) else value


def load_config() -> Dict[str, Any]:
    """Return a structured config dict.

    Raises:
        RuntimeError: if the provider URL or the service-role key is missing.
    """
    opts = _load_options()

    url = str(_setting(opts, "SUPABASE_URL", "supabase_url")).rstrip("/")
    service_role_key = str(_setting(opts, "SUPABASE_SERVICE_ROLE_KEY", "supabase_service_role_key"))

    if not url or not service_role_key:
        raise RuntimeError(
            "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must both be set.  "
            f"For local dev set {OPTIONS_PATH_ENV} to your dev options file."
        )

    raw_timeout = _setting(opts, "SUPABASE_TIMEOUT", "supabase_timeout", DEFAULT_TIMEOUT)
    try:
        timeout = float(raw_timeout)
        if timeout <= 0:
            raise ValueError("timeout must be > 0")
    except (TypeError, ValueError) as exc:
        log.warning("Invalid supabase_timeout (%r): %s – falling back to %s", raw_timeout, exc, DEFAULT_TIMEOUT)
        timeout = DEFAULT_TIMEOUT

    raw_port = _setting(opts, "PORT", "port", DEFAULT_PORT)
    try:
        port = int(raw_port)
        if port <= 0:
            raise ValueError("port must be > 0")
    except (TypeError, ValueError) as exc:
        log.warning("Invalid port (%r): %s – falling back to %s", raw_port, exc, DEFAULT_PORT)
        port = DEFAULT_PORT

    return {
        "supabase": {
            "url":              url,
            "service_role_key": service_role_key,
            "timeout":          timeout,
        },
        "cors": {
            "allow_origin": str(_setting(opts, "CORS_ALLOW_ORIGIN", "cors_allow_origin", DEFAULT_ALLOW_ORIGIN)),
        },
        "server": {
            "host": str(_setting(opts, "HOST", "host", DEFAULT_HOST)),
            "port": port,
        },
    }


def cors_allow_origin() -> str:
    """Allowed origin for CORS headers.

    Read on its own so pre-flight and error responses never depend on the
    provider credentials being configured.
    """
    try:
        opts = _load_options()
    except (OSError, ValueError, RuntimeError) as exc:
        log.warning("Could not read options file for CORS origin: %s", exc)
        opts = {}
    return str(_setting(opts, "CORS_ALLOW_ORIGIN", "cors_allow_origin", DEFAULT_ALLOW_ORIGIN))
