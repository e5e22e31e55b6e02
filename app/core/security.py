# app/core/security.py
import hmac
import logging

from fastapi import Header, HTTPException

from app.core.config import settings

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def verify_admin_token(authorization: str | None, admin_token: str | None) -> bool:
    """Constant-time check of an `Authorization: Bearer <token>` header."""
    if not admin_token or not authorization:
        return False
    expected = f"{BEARER_PREFIX}{admin_token}"
    return hmac.compare_digest(authorization.encode("utf-8"), expected.encode("utf-8"))


def require_admin(authorization: str | None = Header(default=None)) -> None:
    if not verify_admin_token(authorization, settings.ADMIN_TOKEN):
        logger.warning("Rejected sync request: bad or missing admin token")
        raise HTTPException(status_code=401, detail="Unauthorized")
