"""Match Service - select/insert/update/delete against the matches table.

Invariants:
    - list_matches applies only the filters given, combined with AND, unordered
    - create_match always persists status=scheduled
    - update_match writes only the supplied columns and returns the updated row
    - delete_match performs no existence check; commentary cascades at the FK
"""

from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from matchfeed.core.domain_types import MatchId, MatchStatus
from matchfeed.core.errors import RequestValidationFailed, ResourceNotFoundError
from matchfeed.infrastructure.database import storage_errors
from matchfeed.models.match import Match


async def list_matches(
    db: AsyncSession,
    status: MatchStatus | None = None,
    sport: str | None = None,
) -> list[Match]:
    query = select(Match)
    if status:
        query = query.where(Match.status == status)
    if sport:
        query = query.where(Match.sport == sport)
    async with storage_errors(db, "select"):
        result = await db.execute(query)
        return list(result.scalars().all())


async def get_match(db: AsyncSession, match_id: MatchId) -> Match:
    """Get match or raise ResourceNotFoundError."""
    async with storage_errors(db, "select"):
        result = await db.execute(select(Match).where(Match.id == match_id))
        match = result.scalar_one_or_none()
    if match is None:
        raise ResourceNotFoundError("Match", match_id)
    return match


async def create_match(db: AsyncSession, row: dict[str, Any]) -> Match:
    match = Match(**{**row, "status": MatchStatus.SCHEDULED})
    async with storage_errors(db, "insert"):
        db.add(match)
        await db.commit()
        await db.refresh(match)
    return match


async def update_match(
    db: AsyncSession, match_id: MatchId, changes: dict[str, Any],
) -> Match:
    """Apply a partial update. Raises 404 when no row has this id."""
    if not changes:
        raise RequestValidationFailed("No fields provided for update")
    stmt = (
        update(Match)
        .where(Match.id == match_id)
        .values({getattr(Match, name): value for name, value in changes.items()})
        .returning(Match)
    )
    async with storage_errors(db, "update"):
        result = await db.execute(stmt)
        match = result.scalar_one_or_none()
        await db.commit()
    if match is None:
        raise ResourceNotFoundError("Match", match_id)
    return match


async def delete_match(db: AsyncSession, match_id: MatchId) -> None:
    async with storage_errors(db, "delete"):
        await db.execute(delete(Match).where(Match.id == match_id))
        await db.commit()
