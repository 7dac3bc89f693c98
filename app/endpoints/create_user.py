"""
POST /create-user-by-admin – provision a user through the Supabase admin API.

The mobile app's administrators call this to add staff to their company.
The handler validates the body, creates the auth user with the service-role
key, and relies on the project's database trigger to build the profile row
from ``user_metadata``.  It never writes that row itself.
"""

import json
import logging

from fastapi import APIRouter, Request

from auth_admin import AuthAdminClient, AuthApiError
from config import load_config
from cors import json_response, preflight_response
from schemas import CreateUserRequest

log = logging.getLogger(__name__)
router = APIRouter()

PATH = "/create-user-by-admin"
MIN_PASSWORD_LENGTH = 6

MSG_MISSING_FIELDS = "Missing required fields in the request."
MSG_PASSWORD_TOO_SHORT = f"Password must be at least {MIN_PASSWORD_LENGTH} characters."
MSG_INTERNAL_ERROR = "Internal server error."
MSG_METHOD_NOT_ALLOWED = "Method not allowed."


@router.options(PATH, include_in_schema=False)
async def create_user_preflight():
    """CORS pre-flight: answered before (and without) reading the body."""
    return preflight_response()


@router.api_route(PATH, methods=["GET", "HEAD", "PUT", "PATCH", "DELETE"], include_in_schema=False)
async def create_user_wrong_method():
    return json_response({"error": MSG_METHOD_NOT_ALLOWED}, status_code=405)


@router.post(PATH)
async def create_user_by_admin(request: Request):
    try:
        return await _create_user_impl(request)
    except Exception:
        # Details stay in the server log; the caller only gets the generic message.
        log.exception("Unexpected error in create_user_by_admin")
        return json_response({"error": MSG_INTERNAL_ERROR}, status_code=500)


async def _create_user_impl(request: Request):
    # 1. Parse – a malformed body raises and lands in the generic 500 path.
    payload = json.loads(await request.body())
    body = CreateUserRequest.from_payload(payload)

    # 2. Validate
    missing = body.missing_fields()
    if missing:
        log.warning("create_user_by_admin: missing fields %s", ", ".join(missing))
        return json_response({"error": MSG_MISSING_FIELDS}, status_code=400)

    if body.password_too_short(MIN_PASSWORD_LENGTH):
        log.warning("create_user_by_admin: password too short for email=%r", body.email)
        return json_response({"error": MSG_PASSWORD_TOO_SHORT}, status_code=400)

    # 3. Delegate with the service-role credential (read fresh per request).
    cfg = load_config()
    admin = AuthAdminClient.from_config(cfg["supabase"])
    try:
        user = await admin.create_user(
            email=body.email,
            password=body.password,
            email_confirm=True,
            user_metadata=body.user_metadata(),
        )
    except AuthApiError as exc:
        # e.g. email already registered – pass the provider's message through.
        log.error(
            "Supabase Auth rejected user creation (HTTP %s) for email=%r: %s",
            exc.status, body.email, exc.message,
        )
        return json_response({"error": exc.message}, status_code=400)

    log.info(
        "create_user_by_admin: created user id=%s rol=%r empresa_id=%r",
        user.get("id"), body.role, body.organization_id,
    )
    return json_response({"user": user})
