"""
ORM Models — portal schema
==========================

Tables
------
users              — portal accounts (super admin flag)
networks           — hotspot networks (one flagged as default)
nodes              — gateways / hotspots, identified by their gw_id
node_stakeholders  — user ↔ node roles (owner, tech officer)

All primary keys are UUIDs.  Timestamps stored in UTC.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from authserver.core.database import Base


# Name of the shared account used by splash-only (no login) hotspots
SPLASH_ONLY_USERNAME = "SPLASH_ONLY_USER"


def _uuid_col(primary_key=False, nullable=False, **kw):
    """UUID column that works for both PostgreSQL and SQLite."""
    return mapped_column(
        String(36),
        primary_key=primary_key,
        nullable=nullable,
        default=lambda: str(uuid.uuid4()),
        **kw,
    )


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# users
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class User(Base):
    __tablename__ = "users"

    id:             Mapped[str]      = _uuid_col(primary_key=True)
    username:       Mapped[str]      = mapped_column(String(64),  unique=True, nullable=False, index=True)
    email:          Mapped[str]      = mapped_column(String(255), nullable=False, default="")
    is_super_admin: Mapped[bool]     = mapped_column(Boolean, default=False, nullable=False)
    created_at:     Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    stakes: Mapped[list["NodeStakeholder"]] = relationship(back_populates="user", cascade="all, delete-orphan")

    @property
    def is_splash_only(self) -> bool:
        return self.username == SPLASH_ONLY_USERNAME


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# networks
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Network(Base):
    __tablename__ = "networks"

    id:                 Mapped[str]  = _uuid_col(primary_key=True)
    name:               Mapped[str]  = mapped_column(String(128), unique=True, nullable=False)
    homepage_url:       Mapped[str]  = mapped_column(String(512), default="", nullable=False)
    tech_support_email: Mapped[str]  = mapped_column(String(255), default="", nullable=False)
    is_default:         Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    nodes: Mapped[list["Node"]] = relationship(back_populates="network", cascade="all, delete-orphan")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# nodes
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class Node(Base):
    __tablename__ = "nodes"

    id:         Mapped[str] = _uuid_col(primary_key=True)
    network_id: Mapped[str] = mapped_column(String(36), ForeignKey("networks.id", ondelete="CASCADE"), nullable=False, index=True)
    gw_id:      Mapped[str] = mapped_column(String(128), unique=True, nullable=False, index=True)
    name:       Mapped[str] = mapped_column(String(255), default="", nullable=False)

    network:      Mapped["Network"]               = relationship(back_populates="nodes")
    stakeholders: Mapped[list["NodeStakeholder"]] = relationship(back_populates="node", cascade="all, delete-orphan")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# node_stakeholders
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class NodeStakeholder(Base):
    """
    Role of a user on a node.

    is_owner        : may administer the node
    is_tech_officer : receives technical alerts for the node
    """
    __tablename__ = "node_stakeholders"
    __table_args__ = (
        UniqueConstraint("node_id", "user_id", name="uq_node_stakeholder"),
    )

    id:              Mapped[str]  = _uuid_col(primary_key=True)
    node_id:         Mapped[str]  = mapped_column(String(36), ForeignKey("nodes.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id:         Mapped[str]  = mapped_column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    is_owner:        Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_tech_officer: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    node: Mapped["Node"] = relationship(back_populates="stakeholders")
    user: Mapped["User"] = relationship(back_populates="stakes")
