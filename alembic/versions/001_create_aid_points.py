"""create aid_points table

Revision ID: 001_aid_points
Revises:
Create Date: 2026-10-19

Ingested, geotagged news updates. news_link_id is the upsert key;
created_at drives the 90-day retention delete.
"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_aid_points"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "aid_points",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("needs", sa.Text(), nullable=False, server_default="[]"),
        sa.Column("ngo_link", sa.String(length=2048), nullable=True),
        sa.Column("category", sa.String(length=32), nullable=False),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="ACTIVE"),
        sa.Column("last_updated", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("news_link_id", sa.String(length=64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("news_link_id", name="uq_aid_points_news_link_id"),
    )
    op.create_index("ix_aid_points_created_at", "aid_points", ["created_at"])
    op.create_index("ix_aid_points_last_updated", "aid_points", ["last_updated"])


def downgrade() -> None:
    op.drop_index("ix_aid_points_last_updated", table_name="aid_points")
    op.drop_index("ix_aid_points_created_at", table_name="aid_points")
    op.drop_table("aid_points")
