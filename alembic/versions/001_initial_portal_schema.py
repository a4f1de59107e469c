"""initial portal schema: users, networks, nodes, node_stakeholders

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""
from __future__ import annotations

from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id",             sa.String(36),  primary_key=True, nullable=False),
        sa.Column("username",       sa.String(64),  nullable=False),
        sa.Column("email",          sa.String(255), nullable=False, server_default=""),
        sa.Column("is_super_admin", sa.Boolean(),   nullable=False, server_default=sa.false()),
        sa.Column("created_at",     sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "networks",
        sa.Column("id",                 sa.String(36),  primary_key=True, nullable=False),
        sa.Column("name",               sa.String(128), nullable=False, unique=True),
        sa.Column("homepage_url",       sa.String(512), nullable=False, server_default=""),
        sa.Column("tech_support_email", sa.String(255), nullable=False, server_default=""),
        sa.Column("is_default",         sa.Boolean(),   nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "nodes",
        sa.Column("id",         sa.String(36),  primary_key=True, nullable=False),
        sa.Column("network_id", sa.String(36),  sa.ForeignKey("networks.id", ondelete="CASCADE"), nullable=False),
        sa.Column("gw_id",      sa.String(128), nullable=False),
        sa.Column("name",       sa.String(255), nullable=False, server_default=""),
    )
    op.create_index("ix_nodes_network_id", "nodes", ["network_id"])
    op.create_index("ix_nodes_gw_id",      "nodes", ["gw_id"], unique=True)

    op.create_table(
        "node_stakeholders",
        sa.Column("id",              sa.String(36), primary_key=True, nullable=False),
        sa.Column("node_id",         sa.String(36), sa.ForeignKey("nodes.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id",         sa.String(36), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("is_owner",        sa.Boolean(),  nullable=False, server_default=sa.false()),
        sa.Column("is_tech_officer", sa.Boolean(),  nullable=False, server_default=sa.false()),
        sa.UniqueConstraint("node_id", "user_id", name="uq_node_stakeholder"),
    )
    op.create_index("ix_node_stakeholders_node_id", "node_stakeholders", ["node_id"])
    op.create_index("ix_node_stakeholders_user_id", "node_stakeholders", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_node_stakeholders_user_id", table_name="node_stakeholders")
    op.drop_index("ix_node_stakeholders_node_id", table_name="node_stakeholders")
    op.drop_table("node_stakeholders")
    op.drop_index("ix_nodes_gw_id",      table_name="nodes")
    op.drop_index("ix_nodes_network_id", table_name="nodes")
    op.drop_table("nodes")
    op.drop_table("networks")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
