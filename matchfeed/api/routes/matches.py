"""Match Routes - CRUD over /matches.

Invariants:
    - Path ids are parsed as int by FastAPI; non-integers are rejected with 400
    - POST ignores any status in the body (always scheduled), answers 201
    - PUT touches only the fields present in the body
    - DELETE answers 200 whether or not a row existed
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status
from pydantic import BeforeValidator
from sqlalchemy.ext.asyncio import AsyncSession

from matchfeed.core.domain_types import INT32_MAX, MatchId, MatchStatus
from matchfeed.infrastructure.database import get_db
from matchfeed.schemas.base import blank_to_none
from matchfeed.schemas.match import MatchCreate, MatchUpdate, serialize_match
from matchfeed.services import matches as match_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/matches", tags=["matches"])

MatchIdPath = Annotated[int, Path(le=INT32_MAX)]
StatusFilter = Annotated[
    MatchStatus | None, BeforeValidator(blank_to_none), Query(alias="status"),
]


@router.get("")
async def list_matches(
    status_filter: StatusFilter = None,
    sport: str | None = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """List matches, optionally filtered by status and/or sport."""
    matches = await match_service.list_matches(
        db, status=status_filter, sport=sport,
    )
    return {"success": True, "data": [serialize_match(m) for m in matches]}


@router.get("/{match_id}")
async def get_match(match_id: MatchIdPath, db: AsyncSession = Depends(get_db)):
    match = await match_service.get_match(db, MatchId(match_id))
    return {"success": True, "data": serialize_match(match)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_match(body: MatchCreate, db: AsyncSession = Depends(get_db)):
    """Create a match in the scheduled state."""
    match = await match_service.create_match(db, body.to_row())
    logger.info(
        f"Match created: {match.home_team} vs {match.away_team}",
        extra={"match_id": match.id},
    )
    return {"success": True, "data": serialize_match(match)}


@router.put("/{match_id}")
async def update_match(
    match_id: MatchIdPath, body: MatchUpdate, db: AsyncSession = Depends(get_db),
):
    """Update status, scores and/or end time."""
    changes = body.changes()
    match = await match_service.update_match(db, MatchId(match_id), changes)
    logger.info(
        f"Match updated: {', '.join(changes)}", extra={"match_id": match.id},
    )
    return {"success": True, "data": serialize_match(match)}


@router.delete("/{match_id}")
async def delete_match(match_id: MatchIdPath, db: AsyncSession = Depends(get_db)):
    """Delete a match and, through the FK cascade, its commentary."""
    await match_service.delete_match(db, MatchId(match_id))
    logger.info("Match deleted", extra={"match_id": match_id})
    return {"success": True, "message": "Match deleted successfully"}
