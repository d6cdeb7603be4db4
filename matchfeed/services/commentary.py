"""Commentary Service - select/insert/update/delete against the commentary table.

Invariants:
    - list_for_match orders newest first (created_at DESC, then id DESC)
    - list_for_match does not check that the match exists
    - create_commentary relies on the FK to reject unknown match ids (StorageError)
    - delete_commentary performs no existence check
"""

from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from matchfeed.core.domain_types import CommentaryId, MatchId
from matchfeed.core.errors import RequestValidationFailed, ResourceNotFoundError
from matchfeed.infrastructure.database import storage_errors
from matchfeed.models.commentary import Commentary


async def list_for_match(db: AsyncSession, match_id: MatchId) -> list[Commentary]:
    query = (
        select(Commentary)
        .where(Commentary.match_id == match_id)
        .order_by(Commentary.created_at.desc(), Commentary.id.desc())
    )
    async with storage_errors(db, "select"):
        result = await db.execute(query)
        return list(result.scalars().all())


async def create_commentary(db: AsyncSession, row: dict[str, Any]) -> Commentary:
    entry = Commentary(**row)
    async with storage_errors(db, "insert"):
        db.add(entry)
        await db.commit()
        await db.refresh(entry)
    return entry


async def update_commentary(
    db: AsyncSession, commentary_id: CommentaryId, changes: dict[str, Any],
) -> Commentary:
    """Apply a partial update. Raises 404 when no row has this id."""
    if not changes:
        raise RequestValidationFailed("No fields provided for update")
    stmt = (
        update(Commentary)
        .where(Commentary.id == commentary_id)
        .values({
            getattr(Commentary, name): value for name, value in changes.items()
        })
        .returning(Commentary)
    )
    async with storage_errors(db, "update"):
        result = await db.execute(stmt)
        entry = result.scalar_one_or_none()
        await db.commit()
    if entry is None:
        raise ResourceNotFoundError("Commentary", commentary_id)
    return entry


async def delete_commentary(db: AsyncSession, commentary_id: CommentaryId) -> None:
    async with storage_errors(db, "delete"):
        await db.execute(delete(Commentary).where(Commentary.id == commentary_id))
        await db.commit()
