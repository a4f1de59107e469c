#!/usr/bin/env python3
# -----------------------------------------------------------------------------
"""Administration landing page."""
# -----------------------------------------------------------------------------

from __future__ import annotations

from gettext import gettext as _

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from portalui.composer import SECTION_ADMIN, PageComposer
from portalui.context import PortalContext
from portalui.dependencies import get_portal_context
from portalui.templating import get_renderer

router = APIRouter(tags=["admin"])


# -----------------------------------------------------------------------------

@router.get("/admin", response_class=HTMLResponse)
async def admin_home(ctx: PortalContext = Depends(get_portal_context)):
    composer = PageComposer(ctx)
    composer.set_title(f"{ctx.network.name} {_('administration')}")
    await composer.set_tool_section(SECTION_ADMIN)
    composer.set_main_content(get_renderer().fetch("sites/admin.html", {
        "network_name": ctx.network.name,
        "is_valid_user": ctx.is_authenticated(),
    }))
    return composer.display()
