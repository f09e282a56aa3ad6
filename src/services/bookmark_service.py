"""Service layer for bookmark CRUD operations."""
import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from schemas.bookmark import BookmarkCreate, BookmarkUpdate
from services.exceptions import BookmarkAccessDeniedError

logger = logging.getLogger(__name__)


async def create_bookmark(
    db: AsyncSession,
    user_id: int,
    data: BookmarkCreate,
) -> Bookmark:
    """
    Create a new bookmark owned by user_id.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    bookmark = Bookmark(
        user_id=user_id,
        title=data.title,
        description=data.description,
        link=data.link,
    )
    db.add(bookmark)
    await db.flush()
    await db.refresh(bookmark)
    return bookmark


async def get_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
) -> Bookmark | None:
    """Get a bookmark by ID, scoped to user. Returns None if not found or wrong user."""
    result = await db.execute(
        select(Bookmark).where(
            Bookmark.id == bookmark_id,
            Bookmark.user_id == user_id,
        ),
    )
    return result.scalar_one_or_none()


async def get_bookmarks(
    db: AsyncSession,
    user_id: int,
) -> list[Bookmark]:
    """Get all bookmarks for a user in insertion order."""
    result = await db.execute(
        select(Bookmark)
        .where(Bookmark.user_id == user_id)
        .order_by(Bookmark.id),
    )
    return list(result.scalars().all())


async def update_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
    data: BookmarkUpdate,
) -> Bookmark:
    """
    Apply a partial update to a bookmark owned by user_id.

    The ownership check and the write are one conditional UPDATE, so a
    concurrent delete cannot slip in between a read and the write.

    Raises:
        BookmarkAccessDeniedError: If the bookmark does not exist or is owned by another user.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    update_data = data.model_dump(exclude_unset=True)
    if not update_data:
        bookmark = await get_bookmark(db, user_id, bookmark_id)
        if bookmark is None:
            raise BookmarkAccessDeniedError(bookmark_id)
        return bookmark

    result = await db.execute(
        update(Bookmark)
        .where(Bookmark.id == bookmark_id, Bookmark.user_id == user_id)
        .values(**update_data),
    )
    if result.rowcount == 0:
        logger.info(
            "Update denied for bookmark id=%s requested by user id=%s", bookmark_id, user_id,
        )
        raise BookmarkAccessDeniedError(bookmark_id)

    refreshed = await db.execute(
        select(Bookmark)
        .where(Bookmark.id == bookmark_id)
        .execution_options(populate_existing=True),
    )
    return refreshed.scalar_one()


async def delete_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
) -> None:
    """
    Permanently delete a bookmark owned by user_id.

    Raises:
        BookmarkAccessDeniedError: If the bookmark does not exist or is owned by another user.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    result = await db.execute(
        delete(Bookmark).where(
            Bookmark.id == bookmark_id,
            Bookmark.user_id == user_id,
        ),
    )
    if result.rowcount == 0:
        logger.info(
            "Delete denied for bookmark id=%s requested by user id=%s", bookmark_id, user_id,
        )
        raise BookmarkAccessDeniedError(bookmark_id)
