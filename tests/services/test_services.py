"""Services - statements against a real (SQLite) session.

Invariants:
    - Empty updates are rejected before any statement runs
    - FK violations surface as StorageError and leave the session usable
"""

from datetime import datetime, timezone

import pytest

from matchfeed.core.domain_types import MatchStatus
from matchfeed.core.errors import (
    RequestValidationFailed, ResourceNotFoundError, StorageError,
)
from matchfeed.services import commentary as commentary_service
from matchfeed.services import matches as match_service

START = datetime(2026, 3, 1, 15, tzinfo=timezone.utc)


def _match_row(**overrides):
    return {
        "sport": "football", "home_team": "A", "away_team": "B",
        "start_time": START, **overrides,
    }


def _commentary_row(match_id, **overrides):
    return {
        "match_id": match_id, "sequence": 1, "event_type": "kickoff",
        "actor": "Referee", "team": "A", "message": "We are underway",
        "metadata_": None, "tags": [], **overrides,
    }


async def test_create_match_ignores_status_in_row(test_db):
    match = await match_service.create_match(
        test_db, _match_row(status=MatchStatus.FINISHED),
    )
    assert match.id is not None
    assert match.status == MatchStatus.SCHEDULED
    assert match.home_score == 0


async def test_update_match_empty_changes_rejected(test_db):
    with pytest.raises(RequestValidationFailed):
        await match_service.update_match(test_db, 1, {})


async def test_update_match_unknown_id(test_db):
    with pytest.raises(ResourceNotFoundError):
        await match_service.update_match(test_db, 77, {"home_score": 1})


async def test_list_matches_filters(test_db):
    football = await match_service.create_match(test_db, _match_row())
    await match_service.create_match(test_db, _match_row(sport="rugby"))
    await match_service.update_match(
        test_db, football.id, {"status": MatchStatus.LIVE},
    )

    live = await match_service.list_matches(test_db, status=MatchStatus.LIVE)
    assert [m.id for m in live] == [football.id]
    rugby = await match_service.list_matches(test_db, sport="rugby")
    assert [m.sport for m in rugby] == ["rugby"]
    assert len(await match_service.list_matches(test_db)) == 2


async def test_create_commentary_for_missing_match_raises_storage_error(test_db):
    with pytest.raises(StorageError) as exc_info:
        await commentary_service.create_commentary(test_db, _commentary_row(404))
    assert exc_info.value.operation == "insert"

    # session rolled back and still usable
    assert await commentary_service.list_for_match(test_db, 404) == []


async def test_delete_match_cascades(test_db):
    match = await match_service.create_match(test_db, _match_row())
    await commentary_service.create_commentary(test_db, _commentary_row(match.id))
    await match_service.delete_match(test_db, match.id)
    assert await commentary_service.list_for_match(test_db, match.id) == []


async def test_update_commentary_unknown_id(test_db):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await commentary_service.update_commentary(test_db, 12, {"message": "x"})
    assert exc_info.value.message == "Commentary not found"
