"""
Rate Limiting Configuration

Uses slowapi for request rate limiting.
Limits are configurable via environment variables.
"""
from __future__ import annotations
import base64
import binascii

from fastapi import Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from adminboard.utils.config import get_settings

SETTINGS = get_settings()


def get_user_identifier(request: Request) -> str:
    """
    Get rate limit key from the Basic auth user, falling back to the client IP.
    """
    auth = request.headers.get("Authorization", "")
    if auth.startswith("Basic "):
        try:
            decoded = base64.b64decode(auth[6:]).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            return get_remote_address(request)
        return f"user:{decoded.split(':')[0]}"
    return get_remote_address(request)


DASHBOARD_RATE_LIMIT = SETTINGS["RATE_LIMIT_DASHBOARD"]

limiter = Limiter(
    key_func=get_user_identifier,
    default_limits=[SETTINGS["RATE_LIMIT_DEFAULT"]],
    storage_uri=SETTINGS["RATE_LIMIT_STORAGE"],
)
