"""
Authentication utilities for FastAPI routes.

Supabase JWT validation for caseworker routes, and the PIN gate that
protects knowledge base administration.
"""

import logging
import secrets

from fastapi import Header, HTTPException
from pydantic import BaseModel

from casework.config import settings
from casework.db.client import get_service_client

logger = logging.getLogger(__name__)


class AuthenticatedUser(BaseModel):
    """Authenticated caseworker from Supabase JWT."""
    id: str
    email: str | None
    access_token: str


def _validate_token(access_token: str) -> AuthenticatedUser:
    try:
        client = get_service_client()
        user_response = client.auth.get_user(access_token)
    except Exception as e:
        logger.warning(f"Auth validation failed: {e}")
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    if not user_response or not user_response.user:
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    user = user_response.user
    return AuthenticatedUser(id=user.id, email=user.email, access_token=access_token)


async def get_current_user(authorization: str = Header(None)) -> AuthenticatedUser:
    """
    Validate Supabase JWT and extract user info.

    Expects Authorization header: "Bearer <access_token>"
    """
    if not authorization:
        raise HTTPException(status_code=401, detail="Missing authorization header")

    if not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Invalid authorization format")

    return _validate_token(authorization[7:])


async def get_optional_user(authorization: str = Header(None)) -> AuthenticatedUser | None:
    """Like get_current_user, but anonymous requests get None instead of a 401."""
    if not authorization:
        return None
    return await get_current_user(authorization)


async def require_admin_pin(x_admin_pin: str = Header(None)) -> None:
    """Gate knowledge base edits behind the admin PIN (X-Admin-Pin header)."""
    if not x_admin_pin:
        raise HTTPException(status_code=403, detail="Admin PIN required")

    if not secrets.compare_digest(x_admin_pin, settings.knowledge_admin_pin):
        logger.warning("Rejected knowledge admin request with wrong PIN")
        raise HTTPException(status_code=403, detail="Invalid admin PIN")
