from __future__ import annotations

from fastapi import Header, HTTPException

from value_engine.config import get_default_assumptions, settings
from value_engine.schemas.assumptions import Assumptions


def require_shared_secret(x_value_engine_secret: str | None = Header(default=None)) -> None:
    """
    v1 security: shared secret header from the calling app.
    Header name: X-VALUE-ENGINE-SECRET
    """
    expected = settings.VALUE_ENGINE_SECRET
    if not expected:
        # If secret isn't configured, fail closed (recommended).
        raise HTTPException(status_code=500, detail="VALUE_ENGINE_SECRET is not configured")

    if not x_value_engine_secret or x_value_engine_secret != expected:
        raise HTTPException(status_code=401, detail="Unauthorized")


def resolve_assumptions(assumptions: Assumptions | None) -> Assumptions:
    return assumptions if assumptions is not None else get_default_assumptions()
