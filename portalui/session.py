#!/usr/bin/env python3
# -----------------------------------------------------------------------------
"""
Portal session — a signed cookie holding the user id and gateway context.

The cookie is a JWT (python-jose) so it cannot be forged; it carries no
credentials.  Anything that fails to decode is treated as an empty session.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from fastapi import Request, Response
from jose import JWTError, jwt

from authserver.core.config import Settings, get_settings
from portalui.gateway import GATEWAY_KEYS, GatewayContext


logger = logging.getLogger(__name__)

SESS_USER_ID = "user_id"

_SESSION_KEYS = (SESS_USER_ID, *GATEWAY_KEYS)


# -----------------------------------------------------------------------------

class PortalSession:
    """Dict-like view of the session cookie's claims."""

    def __init__(self, data: Optional[dict[str, Any]] = None) -> None:
        self._data = {k: v for k, v in (data or {}).items() if k in _SESSION_KEYS and v}
        self.modified = False

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Optional[str]) -> None:
        if key not in _SESSION_KEYS:
            raise KeyError(key)
        if value:
            self._data[key] = value
        else:
            self._data.pop(key, None)
        self.modified = True

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def as_dict(self) -> dict[str, Any]:
        return dict(self._data)

    # ------------------------------------------------------------ helpers

    @property
    def user_id(self) -> Optional[str]:
        return self._data.get(SESS_USER_ID)

    def set_gateway(self, gateway: GatewayContext) -> None:
        """Store a complete gateway context; partial ones are ignored."""
        if not gateway.is_complete:
            return
        for key, value in gateway.as_dict().items():
            self.set(key, value)

    def clear_user(self) -> None:
        self.set(SESS_USER_ID, None)


# -----------------------------------------------------------------------------

def encode_session(session: PortalSession, settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    expire = datetime.now(tz=timezone.utc) + timedelta(minutes=settings.session_expire_minutes)
    claims = {**session.as_dict(), "exp": expire}
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def decode_session(token: Optional[str], settings: Optional[Settings] = None) -> PortalSession:
    if not token:
        return PortalSession()
    settings = settings or get_settings()
    try:
        claims = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError as exc:
        logger.debug("Discarding unreadable session cookie: %s", exc)
        return PortalSession()
    return PortalSession(claims)


# -----------------------------------------------------------------------------

def load_session(request: Request) -> PortalSession:
    settings = get_settings()
    return decode_session(request.cookies.get(settings.session_cookie_name), settings)


def save_session(response: Response, session: PortalSession) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=encode_session(session, settings),
        max_age=settings.session_expire_minutes * 60,
        httponly=True,
        samesite="lax",
        secure=settings.environment == "production",
    )


# -----------------------------------------------------------------------------
