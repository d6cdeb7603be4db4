"""Initial schema - match_status enum, matches, commentary.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

commentary.match_id carries ON DELETE CASCADE: deleting a match removes
its commentary in the same statement.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

match_status = postgresql.ENUM(
    "scheduled", "live", "finished", name="match_status", create_type=False,
)


def upgrade() -> None:
    match_status.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "matches",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("sport", sa.String(50), nullable=False),
        sa.Column("home_team", sa.String(100), nullable=False),
        sa.Column("away_team", sa.String(100), nullable=False),
        sa.Column("status", match_status, nullable=False, server_default="scheduled"),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("home_score", sa.Integer, nullable=False, server_default="0"),
        sa.Column("away_score", sa.Integer, nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "commentary",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column(
            "match_id", sa.Integer,
            sa.ForeignKey("matches.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("minute", sa.Integer, nullable=True),
        sa.Column("sequence", sa.Integer, nullable=False),
        sa.Column("period", sa.String(20), nullable=True),
        sa.Column("event_type", sa.String(50), nullable=False),
        sa.Column("actor", sa.String(100), nullable=False),
        sa.Column("team", sa.String(100), nullable=False),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("metadata", postgresql.JSONB, nullable=True),
        sa.Column("tags", postgresql.ARRAY(sa.Text), nullable=True, server_default="{}"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_commentary_match_id", "commentary", ["match_id"])


def downgrade() -> None:
    op.drop_index("ix_commentary_match_id", table_name="commentary")
    op.drop_table("commentary")
    op.drop_table("matches")
    match_status.drop(op.get_bind(), checkfirst=True)
