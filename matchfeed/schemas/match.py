"""Match Schemas - request validation and response shaping for /matches.

Invariants:
    - MatchCreate requires sport, homeTeam, awayTeam, startTime (non-empty)
    - MatchCreate has no status field: new matches are always scheduled
    - MatchUpdate.changes() holds only the fields present in the request body
    - status/homeScore/awayScore may be omitted but never set to null
"""

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator, model_validator

from matchfeed.core.domain_types import INT32_MAX, INT32_MIN, MatchStatus
from matchfeed.schemas.base import (
    RequestModel, ResponseModel, reject_null, require_present,
)

REQUIRED_ON_CREATE = ("sport", "home_team", "away_team", "start_time")


class MatchCreate(RequestModel):
    """New match. Any status in the body is ignored."""
    sport: str | None = Field(None, max_length=50)
    home_team: str | None = Field(None, max_length=100)
    away_team: str | None = Field(None, max_length=100)
    start_time: datetime | None = None

    @model_validator(mode="after")
    def check_required(self):
        require_present(self, REQUIRED_ON_CREATE)
        return self

    def to_row(self) -> dict[str, Any]:
        return {
            "sport": self.sport,
            "home_team": self.home_team,
            "away_team": self.away_team,
            "start_time": self.start_time,
            "status": MatchStatus.SCHEDULED,
        }


class MatchUpdate(RequestModel):
    """Partial match update. endTime may be cleared with null."""
    status: MatchStatus | None = None
    home_score: int | None = Field(None, ge=INT32_MIN, le=INT32_MAX)
    away_score: int | None = Field(None, ge=INT32_MIN, le=INT32_MAX)
    end_time: datetime | None = None

    @field_validator("status", "home_score", "away_score")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)


class MatchRead(ResponseModel):
    id: int
    sport: str
    home_team: str
    away_team: str
    status: MatchStatus
    start_time: datetime
    end_time: datetime | None
    home_score: int
    away_score: int
    created_at: datetime


def serialize_match(match) -> dict[str, Any]:
    return MatchRead.model_validate(match).to_json()
