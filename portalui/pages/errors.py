#!/usr/bin/env python3
# -----------------------------------------------------------------------------
"""
Error pages.

Handlers run outside the dependency system, so they compose with an
anonymous context and the configured default network: no database access,
no admin chrome.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from gettext import gettext as _

from fastapi import Request

from authserver.core.config import get_settings
from authserver.models import Network
from portalui.composer import PageComposer
from portalui.context import PortalContext
from portalui.session import load_session


logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------

def error_composer(request: Request) -> PageComposer:
    settings = get_settings()
    network = Network(
        name=settings.default_network_name,
        homepage_url=settings.default_network_homepage_url,
        tech_support_email=settings.default_tech_support_email,
    )
    ctx = PortalContext(
        request=request,
        settings=settings,
        network=network,
        session=load_session(request),
        params=dict(request.query_params),
        locale=settings.default_locale,
        request_uri=request.url.path,
    )
    return PageComposer(ctx)


async def not_found(request: Request, exc):
    return error_composer(request).display_error(
        _("Page not found."), show_tech_support_email=False, status_code=404,
    )


async def server_error(request: Request, exc):
    logger.error("Unhandled error on %s: %s", request.url.path, exc)
    return error_composer(request).display_error(
        _("An internal error occurred."), status_code=500,
    )
