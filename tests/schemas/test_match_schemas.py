"""Match Schemas - required fields, forced status, presence-based updates.

Invariants:
    - MatchCreate reports every missing field in one error
    - MatchCreate.to_row() always carries status=scheduled
    - MatchUpdate.changes() distinguishes absent from explicit null
"""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from matchfeed.core.domain_types import MatchStatus
from matchfeed.schemas.match import (
    MatchCreate, MatchUpdate, serialize_match,
)

BODY = {
    "sport": "football", "homeTeam": "A", "awayTeam": "B",
    "startTime": "2026-01-01T10:00:00Z",
}


def test_create_parses_camel_case_and_start_time():
    body = MatchCreate.model_validate(BODY)
    assert body.home_team == "A"
    assert body.start_time == datetime(2026, 1, 1, 10, tzinfo=timezone.utc)


def test_create_to_row_forces_scheduled():
    row = MatchCreate.model_validate({**BODY, "status": "finished"}).to_row()
    assert row["status"] is MatchStatus.SCHEDULED
    assert set(row) == {"sport", "home_team", "away_team", "start_time", "status"}


def test_create_missing_fields_single_error():
    with pytest.raises(ValidationError) as exc_info:
        MatchCreate.model_validate({"homeTeam": "A"})
    errors = exc_info.value.errors()
    assert len(errors) == 1
    assert errors[0]["type"] == "missing_fields"
    assert errors[0]["msg"] == "Missing required fields: sport, awayTeam, startTime"


def test_create_rejects_overlong_sport():
    with pytest.raises(ValidationError):
        MatchCreate.model_validate({**BODY, "sport": "x" * 51})


def test_update_changes_only_present_fields():
    body = MatchUpdate.model_validate({"status": "live"})
    assert body.changes() == {"status": MatchStatus.LIVE}


def test_update_explicit_null_end_time_is_a_change():
    body = MatchUpdate.model_validate({"endTime": None, "homeScore": 1})
    assert body.changes() == {"end_time": None, "home_score": 1}


def test_update_empty_body_has_no_changes():
    assert MatchUpdate.model_validate({}).changes() == {}


@pytest.mark.parametrize("field", ["status", "homeScore", "awayScore"])
def test_update_rejects_null_for_not_null_columns(field):
    with pytest.raises(ValidationError) as exc_info:
        MatchUpdate.model_validate({field: None})
    assert exc_info.value.errors()[0]["type"] == "null_not_allowed"


def test_update_rejects_unknown_status():
    with pytest.raises(ValidationError):
        MatchUpdate.model_validate({"status": "abandoned"})


def test_serialize_match_uses_camel_case():
    row = SimpleNamespace(
        id=1, sport="football", home_team="A", away_team="B",
        status=MatchStatus.LIVE,
        start_time=datetime(2026, 1, 1, 10, tzinfo=timezone.utc),
        end_time=None, home_score=1, away_score=0,
        created_at=datetime(2025, 12, 31, tzinfo=timezone.utc),
    )
    data = serialize_match(row)
    assert data["homeTeam"] == "A"
    assert data["status"] == "live"
    assert data["endTime"] is None
    assert data["startTime"].startswith("2026-01-01T10:00:00")


@pytest.mark.parametrize("field", ["homeScore", "awayScore"])
def test_update_rejects_scores_outside_integer_column(field):
    with pytest.raises(ValidationError):
        MatchUpdate.model_validate({field: 2**31})
    assert MatchUpdate.model_validate({field: 2**31 - 1}).changes()
