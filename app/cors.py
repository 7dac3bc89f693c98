"""
Cross-origin headers shared by every response of the public endpoints.
"""

from typing import Any, Dict

from fastapi.responses import JSONResponse, Response

from config import cors_allow_origin

ALLOW_HEADERS = "authorization, x-client-info, apikey, content-type"
ALLOW_METHODS = "POST, OPTIONS"


def cors_headers() -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin":  cors_allow_origin(),
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
    }


def preflight_response() -> Response:
    """200 with the CORS headers and an empty body."""
    return Response(content=b"", status_code=200, headers=cors_headers())


def json_response(content: Dict[str, Any], status_code: int = 200) -> JSONResponse:
    """JSON body merged with the CORS headers."""
    return JSONResponse(content, status_code=status_code, headers=cors_headers())
