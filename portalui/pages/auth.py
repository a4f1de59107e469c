#!/usr/bin/env python3
# -----------------------------------------------------------------------------
"""Logout — drops the user but keeps the client's gateway."""
# -----------------------------------------------------------------------------

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse

from portalui.gateway import GatewayContext
from portalui.session import load_session, save_session

router = APIRouter(tags=["auth"])


# -----------------------------------------------------------------------------

@router.get("/logout")
async def logout(request: Request):
    session = load_session(request)
    gateway = GatewayContext.resolve(request.query_params, session)

    session.clear_user()
    session.set_gateway(gateway)

    response = RedirectResponse(url="/" + gateway.query_string(), status_code=302)
    save_session(response, session)
    return response
