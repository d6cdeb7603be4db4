"""Match ORM - a sporting event with teams, schedule, status, and score.

Invariants:
    - id is a serial integer primary key
    - status is constrained to MatchStatus (native enum on PostgreSQL, CHECK elsewhere)
    - home_score/away_score default to 0; end_time is nullable
    - Owns its Commentary; deletion cascades at the FK, not in the ORM

Design Decisions:
    - passive_deletes=True: the ON DELETE CASCADE foreign key removes children,
      the ORM never loads them to delete one by one
"""

from datetime import datetime, timezone

from sqlalchemy import Enum, String, Integer, DateTime, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from matchfeed.core.domain_types import MatchStatus, match_status_values
from matchfeed.db.base import Base

match_status_enum = Enum(
    MatchStatus,
    name="match_status",
    values_callable=lambda _: match_status_values(),
    create_constraint=True,
    validate_strings=True,
)


class Match(Base):
    """Match entity - aggregate root for commentary."""
    __tablename__ = "matches"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    sport: Mapped[str] = mapped_column(String(50), nullable=False)
    home_team: Mapped[str] = mapped_column(String(100), nullable=False)
    away_team: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[MatchStatus] = mapped_column(
        match_status_enum,
        nullable=False,
        default=MatchStatus.SCHEDULED,
        server_default=MatchStatus.SCHEDULED.value,
    )
    start_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    end_time: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    home_score: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0",
    )
    away_score: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    commentary: Mapped[list["Commentary"]] = relationship(
        "Commentary", back_populates="match", passive_deletes=True,
    )
