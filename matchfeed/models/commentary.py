"""Commentary ORM - one narrative/event entry in a match's log.

Invariants:
    - Always belongs to a Match (match_id FK, ON DELETE CASCADE)
    - sequence is caller-defined ordering within a match; not unique
    - metadata is opaque JSON (JSONB on PostgreSQL); SQL NULL when absent
    - tags is a text[] on PostgreSQL, defaults to an empty list

Design Decisions:
    - Python attribute `metadata_` maps to column `metadata`: the declarative
      base reserves `metadata` for the table MetaData
    - JSON/ARRAY variants keep the model usable on SQLite for tests
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import (
    JSON, String, Text, Integer, DateTime, ForeignKey, func,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB
from sqlalchemy.orm import Mapped, mapped_column, relationship

from matchfeed.db.base import Base

JsonBlob = JSON(none_as_null=True).with_variant(
    JSONB(none_as_null=True), "postgresql",
)
TagList = JSON().with_variant(ARRAY(Text), "postgresql")


class Commentary(Base):
    """Commentary entry - belongs to exactly one Match."""
    __tablename__ = "commentary"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    match_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("matches.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    minute: Mapped[int | None] = mapped_column(Integer, nullable=True)
    sequence: Mapped[int] = mapped_column(Integer, nullable=False)
    period: Mapped[str | None] = mapped_column(String(20), nullable=True)
    event_type: Mapped[str] = mapped_column(String(50), nullable=False)
    actor: Mapped[str] = mapped_column(String(100), nullable=False)
    team: Mapped[str] = mapped_column(String(100), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    metadata_: Mapped[Any | None] = mapped_column(
        "metadata", JsonBlob, nullable=True,
    )
    tags: Mapped[list[str]] = mapped_column(
        TagList, nullable=True, default=list,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    match: Mapped["Match"] = relationship(
        "Match", back_populates="commentary",
    )
