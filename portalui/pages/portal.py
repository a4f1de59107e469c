#!/usr/bin/env python3
# -----------------------------------------------------------------------------
"""Portal start page — where the gateway sends captured clients."""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from portalui.composer import PageComposer
from portalui.context import PortalContext
from portalui.dependencies import get_portal_context
from portalui.gateway import GatewayContext
from portalui.languages import LOCALE_PARAM
from portalui.session import save_session
from portalui.templating import get_renderer

router = APIRouter(tags=["portal"])


# -----------------------------------------------------------------------------

@router.get("/", response_class=HTMLResponse)
async def portal_home(ctx: PortalContext = Depends(get_portal_context)):
    # A client redirected here by its gateway: remember where it came from
    gateway = GatewayContext.from_mapping(ctx.params)
    if gateway.is_complete:
        ctx.session.set_gateway(gateway)

    composer = PageComposer(ctx)
    composer.set_main_content(get_renderer().fetch("sites/portal.html", {
        "network_name": ctx.network.name,
        "network_homepage_url": ctx.network.homepage_url,
        "is_valid_user": ctx.is_authenticated(),
        "username": ctx.user.username if ctx.user else "",
    }))
    response = composer.display()

    if ctx.session.modified:
        save_session(response, ctx.session)
    if ctx.params.get(LOCALE_PARAM) == ctx.current_locale:
        response.set_cookie(
            key=ctx.settings.locale_cookie_name,
            value=ctx.current_locale,
            max_age=60 * 60 * 24 * 365,
            samesite="lax",
        )
    return response
