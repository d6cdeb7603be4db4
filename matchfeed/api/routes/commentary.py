"""Commentary Routes - list/create under a match, update/delete by id.

Invariants:
    - GET /matches/{match_id}/commentary returns [] for unknown matches (no 404)
    - POST with an unknown match_id fails with 400 from the FK violation
    - PUT /commentary/{id} touches only message and/or metadata
    - DELETE answers 200 whether or not a row existed
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from matchfeed.core.domain_types import INT32_MAX, CommentaryId, MatchId
from matchfeed.infrastructure.database import get_db
from matchfeed.schemas.commentary import (
    CommentaryCreate, CommentaryUpdate, serialize_commentary,
)
from matchfeed.services import commentary as commentary_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["commentary"])

IdPath = Annotated[int, Path(le=INT32_MAX)]


@router.get("/matches/{match_id}/commentary")
async def list_commentary(match_id: IdPath, db: AsyncSession = Depends(get_db)):
    """Commentary for a match, newest first."""
    entries = await commentary_service.list_for_match(db, MatchId(match_id))
    return {
        "success": True,
        "data": [serialize_commentary(e) for e in entries],
    }


@router.post(
    "/matches/{match_id}/commentary", status_code=status.HTTP_201_CREATED,
)
async def create_commentary(
    match_id: IdPath, body: CommentaryCreate, db: AsyncSession = Depends(get_db),
):
    entry = await commentary_service.create_commentary(
        db, body.to_row(MatchId(match_id)),
    )
    logger.info(
        f"Commentary added: {entry.event_type}",
        extra={"match_id": match_id, "commentary_id": entry.id},
    )
    return {"success": True, "data": serialize_commentary(entry)}


@router.put("/commentary/{commentary_id}")
async def update_commentary(
    commentary_id: IdPath,
    body: CommentaryUpdate,
    db: AsyncSession = Depends(get_db),
):
    entry = await commentary_service.update_commentary(
        db, CommentaryId(commentary_id), body.changes(),
    )
    logger.info("Commentary updated", extra={"commentary_id": entry.id})
    return {"success": True, "data": serialize_commentary(entry)}


@router.delete("/commentary/{commentary_id}")
async def delete_commentary(
    commentary_id: IdPath, db: AsyncSession = Depends(get_db),
):
    await commentary_service.delete_commentary(db, CommentaryId(commentary_id))
    logger.info("Commentary deleted", extra={"commentary_id": commentary_id})
    return {"success": True, "message": "Commentary deleted successfully"}
