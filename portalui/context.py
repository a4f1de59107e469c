#!/usr/bin/env python3
# -----------------------------------------------------------------------------
"""
Portal context — carries per-request state into the page composer.

Everything the composer needs from the request, the session and the
database is resolved up front and passed in here; the composer itself never
reaches for ambient state.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from authserver.core.config import Settings, get_settings
from portalui.session import PortalSession


@dataclass
class PortalContext:
    request: Any = None                       # starlette Request (None in unit tests)
    settings: Settings = field(default_factory=get_settings)
    user: Optional[Any] = None                # CurrentUser, None when anonymous
    network: Any = None                       # name / homepage_url / tech_support_email
    session: PortalSession = field(default_factory=PortalSession)
    params: Mapping[str, str] = field(default_factory=dict)   # query + form values
    locale: str = ""
    request_uri: str = "/"
    node_selector: Any = None
    network_selector: Any = None

    def is_authenticated(self) -> bool:
        return self.user is not None

    @property
    def current_locale(self) -> str:
        return self.locale or self.settings.default_locale
