"""Commentary Schemas - request validation and response shaping for commentary.

Invariants:
    - CommentaryCreate requires sequence, eventType, actor, team, message
    - minute, period, metadata default to null; tags defaults to []
    - metadata is any JSON value and passes through untouched
    - CommentaryUpdate.changes() keys are ORM attribute names (metadata -> metadata_)
"""

from datetime import datetime
from typing import Any

from pydantic import Field, JsonValue, field_validator, model_validator

from matchfeed.core.domain_types import INT32_MAX, INT32_MIN
from matchfeed.schemas.base import (
    RequestModel, ResponseModel, reject_null, require_present,
)

REQUIRED_ON_CREATE = ("sequence", "event_type", "actor", "team", "message")


class CommentaryCreate(RequestModel):
    """New commentary entry; matchId comes from the path."""
    minute: int | None = Field(None, ge=INT32_MIN, le=INT32_MAX)
    sequence: int | None = Field(None, ge=INT32_MIN, le=INT32_MAX)
    period: str | None = Field(None, max_length=20)
    event_type: str | None = Field(None, max_length=50)
    actor: str | None = Field(None, max_length=100)
    team: str | None = Field(None, max_length=100)
    message: str | None = None
    metadata: JsonValue = None
    tags: list[str] | None = None

    @model_validator(mode="after")
    def check_required(self):
        require_present(self, REQUIRED_ON_CREATE)
        return self

    def to_row(self, match_id: int) -> dict[str, Any]:
        return {
            "match_id": match_id,
            "minute": self.minute,
            "sequence": self.sequence,
            "period": self.period,
            "event_type": self.event_type,
            "actor": self.actor,
            "team": self.team,
            "message": self.message,
            "metadata_": self.metadata,
            "tags": self.tags or [],
        }


class CommentaryUpdate(RequestModel):
    """Partial commentary update. metadata may be cleared with null."""
    message: str | None = None
    metadata: JsonValue = None

    @field_validator("message")
    @classmethod
    def not_null(cls, v):
        return reject_null(v)

    def changes(self) -> dict[str, Any]:
        values = super().changes()
        if "metadata" in values:
            values["metadata_"] = values.pop("metadata")
        return values


class CommentaryRead(ResponseModel):
    id: int
    match_id: int
    minute: int | None
    sequence: int
    period: str | None
    event_type: str
    actor: str
    team: str
    message: str
    metadata_: JsonValue = Field(None, serialization_alias="metadata")
    tags: list[str] | None
    created_at: datetime


def serialize_commentary(entry) -> dict[str, Any]:
    return CommentaryRead.model_validate(entry).to_json()
