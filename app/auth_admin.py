"""
Supabase Auth admin API helpers.

Covers:
  - POST /auth/v1/admin/users – create a user without the signup flow

Every call authenticates with the service-role key (``apikey`` header plus
bearer token).  No user session is ever obtained, stored or refreshed, so
there is nothing to persist between calls.  A fresh ``httpx.AsyncClient`` is
opened per call and closed before returning.
"""

import json
import logging
from typing import Any, Dict, Optional

import httpx

log = logging.getLogger(__name__)

ADMIN_USERS_PATH = "/auth/v1/admin/users"


class AuthApiError(RuntimeError):
    """The provider rejected the request (HTTP 4xx), e.g. duplicate email."""

    def __init__(self, message: str, status: int) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


class AuthUnavailableError(RuntimeError):
    """The provider failed on its side (HTTP 5xx)."""

    def __init__(self, status: int) -> None:
        super().__init__(f"Supabase Auth admin API returned HTTP {status}")
        self.status = status


def _error_message(resp: httpx.Response) -> str:
    """Extract a human-readable message from a GoTrue error body."""
    try:
        data = resp.json()
    except ValueError:
        return resp.text or f"HTTP {resp.status_code}"
    if isinstance(data, dict):
        for key in ("msg", "message", "error_description", "error"):
            value = data.get(key)
            if value:
                return str(value)
    return resp.text or f"HTTP {resp.status_code}"


class AuthAdminClient:
    """Admin client bound to one project URL and its service-role key."""

    def __init__(
        self,
        url: str,
        service_role_key: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = url.rstrip("/")
        self._service_role_key = service_role_key
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(cls, supabase_cfg: Dict[str, Any]) -> "AuthAdminClient":
        return cls(
            supabase_cfg["url"],
            supabase_cfg["service_role_key"],
            timeout=supabase_cfg.get("timeout", 10.0),
        )

    def _headers(self) -> dict:
        return {
            "apikey":        self._service_role_key,
            "Authorization": f"Bearer {self._service_role_key}",
            "Content-Type":  "application/json",
        }

    async def create_user(
        self,
        email: str,
        password: str,
        email_confirm: bool = True,
        user_metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Create a user via POST /auth/v1/admin/users.

        ``email_confirm=True`` marks the address as already verified so no
        confirmation mail is sent.  ``user_metadata`` is stored on the auth
        user; the project's database trigger reads it to build the profile
        row.

        Returns the provider's user object unchanged.

        Raises:
            AuthApiError: the provider rejected the request (4xx).
            AuthUnavailableError: the provider failed (5xx).
            httpx.HTTPError: transport failure or timeout.
        """
        url = f"{self.url}{ADMIN_USERS_PATH}"
        body = {
            "email":         email,
            "password":      password,
            "email_confirm": email_confirm,
            "user_metadata": user_metadata or {},
        }
        log.info("POST %s  email=%r  metadata=%s", url, email, json.dumps(body["user_metadata"]))

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            resp = await client.post(url, json=body, headers=self._headers())

        log.info("POST %s → HTTP %s", url, resp.status_code)
        if resp.status_code >= 500:
            log.error("create_user: Supabase error HTTP %s — %s", resp.status_code, resp.text)
            raise AuthUnavailableError(resp.status_code)
        if not resp.is_success:
            message = _error_message(resp)
            raise AuthApiError(message, resp.status_code)

        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected create_user response: {resp.text[:200]}")
        # GoTrue returns the bare user; some proxies wrap it as {"user": ...}.
        user = data.get("user", data)
        if not isinstance(user, dict):
            raise ValueError(f"Unexpected create_user response: {resp.text[:200]}")
        log.info("Supabase user created: id=%s email=%r", user.get("id"), user.get("email"))
        return user
