#!/usr/bin/env python3
# -----------------------------------------------------------------------------
"""FastAPI dependencies: per-request PortalContext and PageComposer."""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from authserver.core.config import get_settings
from authserver.core.database import get_db
from authserver.services.networks import get_current_network
from authserver.services.users import load_current_user
from portalui.context import PortalContext
from portalui.languages import LOCALE_PARAM, resolve_locale
from portalui.admin_controls import NetworkSelector, NodeSelector
from portalui.session import load_session
from portalui.templating import get_renderer


# -----------------------------------------------------------------------------

async def request_params(request: Request) -> dict[str, str]:
    """Query string and form values merged; form values win."""
    params = dict(request.query_params)
    content_type = request.headers.get("content-type", "")
    if request.method == "POST" and (
        content_type.startswith("application/x-www-form-urlencoded")
        or content_type.startswith("multipart/form-data")
    ):
        form = await request.form()
        params.update({k: v for k, v in form.items() if isinstance(v, str)})
    return params


async def get_portal_context(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> PortalContext:
    settings = get_settings()
    renderer = get_renderer()
    session = load_session(request)
    params = await request_params(request)

    request_uri = request.url.path
    if request.url.query:
        request_uri += "?" + request.url.query

    return PortalContext(
        request=request,
        settings=settings,
        user=await load_current_user(db, session.user_id),
        network=await get_current_network(db),
        session=session,
        params=params,
        locale=resolve_locale(
            settings.available_locales,
            settings.default_locale,
            requested=params.get(LOCALE_PARAM),
            cookie=request.cookies.get(settings.locale_cookie_name),
        ),
        request_uri=request_uri,
        node_selector=NodeSelector(db, renderer),
        network_selector=NetworkSelector(db, renderer),
    )


# -----------------------------------------------------------------------------
