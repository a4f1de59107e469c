#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Network service — the hotspot network the portal is serving.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from authserver.core.config import get_settings
from authserver.models import Network


# -----------------------------------------------------------------------------

async def create_network(
    db: AsyncSession,
    name: str,
    homepage_url: str = "",
    tech_support_email: str = "",
    is_default: bool = False,
) -> Network:
    network = Network(
        name=name,
        homepage_url=homepage_url,
        tech_support_email=tech_support_email,
        is_default=is_default,
    )
    db.add(network)
    await db.flush()
    return network


# -----------------------------------------------------------------------------

async def get_current_network(db: AsyncSession) -> Network:
    """
    Return the default network.

    Falls back to the first network by name, then to an unsaved Network built
    from the ``default_network_*`` settings so a fresh install still renders.
    """
    result = await db.execute(
        select(Network).order_by(Network.is_default.desc(), Network.name).limit(1)
    )
    network = result.scalar_one_or_none()
    if network:
        return network
    settings = get_settings()
    return Network(
        name=settings.default_network_name,
        homepage_url=settings.default_network_homepage_url,
        tech_support_email=settings.default_tech_support_email,
        is_default=True,
    )


async def list_networks(db: AsyncSession) -> list[Network]:
    result = await db.execute(select(Network).order_by(Network.name))
    return list(result.scalars().all())


# -----------------------------------------------------------------------------
