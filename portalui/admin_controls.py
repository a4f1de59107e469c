#!/usr/bin/env python3
# -----------------------------------------------------------------------------
"""
Database-backed ``<select>`` controls for the administration tool section.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from authserver.services import networks as network_svc
from authserver.services import nodes as node_svc
from authserver.services.nodes import OwnershipFilter
from portalui.templating import TemplateRenderer


# -----------------------------------------------------------------------------

class NodeSelector:
    """Node picker; the ownership filter is applied in the query."""

    def __init__(self, db: AsyncSession, renderer: TemplateRenderer) -> None:
        self.db = db
        self.renderer = renderer

    async def render(self, param_name: str, ownership: OwnershipFilter) -> str:
        nodes = await node_svc.list_nodes(self.db, ownership)
        return self.renderer.fetch("classes/node_select.html", {
            "param_name": param_name,
            "nodes": nodes,
        })


class NetworkSelector:

    def __init__(self, db: AsyncSession, renderer: TemplateRenderer) -> None:
        self.db = db
        self.renderer = renderer

    async def render(self, param_name: str) -> str:
        networks = await network_svc.list_networks(self.db)
        return self.renderer.fetch("classes/network_select.html", {
            "param_name": param_name,
            "networks": networks,
        })
