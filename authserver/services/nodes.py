#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Node service
============
Hotspot nodes and their stakeholders.

Node listings used by administration controls always go through an
``OwnershipFilter``:

  OwnershipFilter.unrestricted()    — every node (super admins)
  OwnershipFilter.owned_by(user_id) — only nodes the user owns

The filter is applied inside the SQL query, never on the rendered list.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement


# -----------------------------------------------------------------------------

from authserver.models import Node, NodeStakeholder


# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class OwnershipFilter:
    owner_id: Optional[str] = None

    @classmethod
    def unrestricted(cls) -> "OwnershipFilter":
        return cls(owner_id=None)

    @classmethod
    def owned_by(cls, user_id: str) -> "OwnershipFilter":
        return cls(owner_id=user_id)

    @property
    def is_restricted(self) -> bool:
        return self.owner_id is not None

    def clause(self) -> Optional[ColumnElement[bool]]:
        """WHERE clause restricting ``nodes`` to the owner, or None."""
        if self.owner_id is None:
            return None
        owned = select(NodeStakeholder.node_id).where(
            NodeStakeholder.is_owner == True,  # noqa: E712
            NodeStakeholder.user_id == self.owner_id,
        )
        return Node.id.in_(owned)


# -----------------------------------------------------------------------------

async def create_node(db: AsyncSession, network_id: str, gw_id: str, name: str = "") -> Node:
    node = Node(network_id=network_id, gw_id=gw_id, name=name or gw_id)
    db.add(node)
    await db.flush()
    return node


async def add_stakeholder(
    db: AsyncSession,
    node_id: str,
    user_id: str,
    is_owner: bool = False,
    is_tech_officer: bool = False,
) -> NodeStakeholder:
    stake = NodeStakeholder(
        node_id=node_id,
        user_id=user_id,
        is_owner=is_owner,
        is_tech_officer=is_tech_officer,
    )
    db.add(stake)
    await db.flush()
    return stake


# -----------------------------------------------------------------------------

async def list_nodes(db: AsyncSession, ownership: OwnershipFilter) -> list[Node]:
    stmt = select(Node).order_by(Node.name)
    clause = ownership.clause()
    if clause is not None:
        stmt = stmt.where(clause)
    result = await db.execute(stmt)
    return list(result.scalars().all())


# -----------------------------------------------------------------------------
