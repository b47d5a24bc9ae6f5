"""Service layer for bookmark CRUD operations."""
import logging

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from schemas.bookmark import BookmarkCreate, BookmarkUpdate
from services.exceptions import BookmarkAccessDeniedError

logger = logging.getLogger(__name__)


async def get_bookmarks(db: AsyncSession, user_id: int) -> list[Bookmark]:
    """Get all bookmarks owned by a user. Order is not guaranteed."""
    result = await db.execute(select(Bookmark).where(Bookmark.user_id == user_id))
    return list(result.scalars().all())


async def get_bookmark(
    db: AsyncSession,
    user_id: int,  # noqa: ARG001
    bookmark_id: int,
) -> Bookmark | None:
    """
    Get a bookmark by ID. Returns None if not found.

    Note: lookup is by ID only and is NOT scoped to `user_id`; any
    authenticated user can read any bookmark. Mutations (update/delete) are
    scoped.
    """
    result = await db.execute(select(Bookmark).where(Bookmark.id == bookmark_id))
    return result.scalar_one_or_none()


async def create_bookmark(
    db: AsyncSession,
    user_id: int,
    data: BookmarkCreate,
) -> Bookmark:
    """
    Create a new bookmark owned by `user_id`.

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
    logger.info("Created bookmark %s for user %s", bookmark.id, user_id)
    return bookmark


async def update_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
    data: BookmarkUpdate,
) -> Bookmark:
    """
    Update the fields present in `data` on a bookmark owned by `user_id`.

    The ownership check and the write are a single
    `UPDATE ... WHERE id = :id AND user_id = :owner RETURNING` statement, so
    there is no window between checking the owner and writing.

    Raises:
        BookmarkAccessDeniedError: If no bookmark with this ID is owned by the user.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    update_data = data.model_dump(exclude_unset=True)
    result = await db.execute(
        update(Bookmark)
        .where(Bookmark.id == bookmark_id, Bookmark.user_id == user_id)
        .values(**update_data, updated_at=func.clock_timestamp())
        .returning(Bookmark)
        .execution_options(synchronize_session=False, populate_existing=True),
    )
    bookmark = result.scalar_one_or_none()
    if bookmark is None:
        logger.warning("User %s denied update of bookmark %s", user_id, bookmark_id)
        raise BookmarkAccessDeniedError(bookmark_id, "edit")
    return bookmark


async def delete_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
) -> None:
    """
    Permanently delete a bookmark owned by `user_id`.

    Raises:
        BookmarkAccessDeniedError: If no bookmark with this ID is owned by the user.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    result = await db.execute(
        delete(Bookmark)
        .where(Bookmark.id == bookmark_id, Bookmark.user_id == user_id)
        .returning(Bookmark.id),
    )
    if result.scalar_one_or_none() is None:
        logger.warning("User %s denied delete of bookmark %s", user_id, bookmark_id)
        raise BookmarkAccessDeniedError(bookmark_id, "delete")
    logger.info("Deleted bookmark %s for user %s", bookmark_id, user_id)
