#!/usr/bin/env python3
# -----------------------------------------------------------------------------
"""
Gateway context — which captive-portal gateway a client sits behind.

A WiFiDog gateway redirects the client to the portal with ``gw_id``,
``gw_address`` and ``gw_port`` in the query string.  The values are kept in
the session so that login and logout can send the client back through the
same gateway.  A context is only usable when all three values are present.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote


GW_ID = "gw_id"
GW_ADDRESS = "gw_address"
GW_PORT = "gw_port"

GATEWAY_KEYS = (GW_ID, GW_ADDRESS, GW_PORT)


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GatewayContext:
    gw_id: Optional[str] = None
    gw_address: Optional[str] = None
    gw_port: Optional[str] = None

    @classmethod
    def from_mapping(cls, source: Mapping[str, Any]) -> "GatewayContext":
        return cls(
            gw_id=_clean(source.get(GW_ID)),
            gw_address=_clean(source.get(GW_ADDRESS)),
            gw_port=_clean(source.get(GW_PORT)),
        )

    @classmethod
    def resolve(
        cls,
        primary: Mapping[str, Any],
        fallback: Mapping[str, Any],
    ) -> "GatewayContext":
        """Per field: the primary source if non-empty, else the fallback."""
        first = cls.from_mapping(primary)
        second = cls.from_mapping(fallback)
        return cls(
            gw_id=first.gw_id or second.gw_id,
            gw_address=first.gw_address or second.gw_address,
            gw_port=first.gw_port or second.gw_port,
        )

    @property
    def is_complete(self) -> bool:
        return bool(self.gw_id and self.gw_address and self.gw_port)

    def as_dict(self) -> dict[str, str]:
        if not self.is_complete:
            return {}
        return {GW_ID: self.gw_id, GW_ADDRESS: self.gw_address, GW_PORT: self.gw_port}

    # ------------------------------------------------------------ fragments

    def _pairs(self) -> str:
        return "&amp;".join(f"{key}={quote(value, safe='')}" for key, value in self.as_dict().items())

    def logout_parameters(self) -> str:
        """``&amp;gw_id=..&amp;gw_address=..&amp;gw_port=..`` or ""."""
        if not self.is_complete:
            return ""
        return "&amp;" + self._pairs()

    def login_parameters(self) -> str:
        """``?gw_id=..&amp;gw_address=..&amp;gw_port=..`` or ""."""
        if not self.is_complete:
            return ""
        return "?" + self._pairs()

    def query_string(self) -> str:
        """Raw (non HTML-escaped) query string for redirects, or ""."""
        if not self.is_complete:
            return ""
        return "?" + "&".join(f"{key}={quote(value, safe='')}" for key, value in self.as_dict().items())


# -----------------------------------------------------------------------------

def gateway_for_logged_in(session: Mapping[str, Any]) -> GatewayContext:
    """A logged-in client's gateway comes from the session only."""
    return GatewayContext.from_mapping(session)


def gateway_for_anonymous(
    params: Mapping[str, Any],
    session: Mapping[str, Any],
) -> GatewayContext:
    """An anonymous client's request parameters win over the session."""
    return GatewayContext.resolve(params, session)


# -----------------------------------------------------------------------------
