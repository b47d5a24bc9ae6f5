"""Bookmark CRUD endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import PrincipalField, get_async_session, get_user
from schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from services import bookmark_service
from services.exceptions import BookmarkAccessDeniedError

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])

# bookmarks.id is a 32-bit INTEGER column
MAX_BOOKMARK_ID = 2_147_483_647


@router.get("", response_model=list[BookmarkResponse])
async def list_bookmarks(
    user_id: int = Depends(get_user(PrincipalField.ID)),
    db: AsyncSession = Depends(get_async_session),
) -> list[BookmarkResponse]:
    """List all bookmarks owned by the current user."""
    bookmarks = await bookmark_service.get_bookmarks(db, user_id)
    return [BookmarkResponse.model_validate(b) for b in bookmarks]


@router.get("/{bookmark_id}", response_model=BookmarkResponse | None)
async def get_bookmark(
    bookmark_id: int = Path(ge=1, le=MAX_BOOKMARK_ID),
    user_id: int = Depends(get_user(PrincipalField.ID)),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse | None:
    """
    Get a single bookmark by ID.

    Responds 200 with `null` when no bookmark has this ID.
    """
    bookmark = await bookmark_service.get_bookmark(db, user_id, bookmark_id)
    if bookmark is None:
        return None
    return BookmarkResponse.model_validate(bookmark)


@router.post("", response_model=BookmarkResponse, status_code=201)
async def create_bookmark(
    data: BookmarkCreate,
    user_id: int = Depends(get_user(PrincipalField.ID)),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Create a new bookmark."""
    bookmark = await bookmark_service.create_bookmark(db, user_id, data)
    return BookmarkResponse.model_validate(bookmark)


@router.patch("/{bookmark_id}", response_model=BookmarkResponse)
async def update_bookmark(
    data: BookmarkUpdate,
    bookmark_id: int = Path(ge=1, le=MAX_BOOKMARK_ID),
    user_id: int = Depends(get_user(PrincipalField.ID)),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Update a bookmark. Only the fields present in the body are changed."""
    try:
        bookmark = await bookmark_service.update_bookmark(db, user_id, bookmark_id, data)
    except BookmarkAccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    return BookmarkResponse.model_validate(bookmark)


@router.delete("/{bookmark_id}", status_code=204)
async def delete_bookmark(
    bookmark_id: int = Path(ge=1, le=MAX_BOOKMARK_ID),
    user_id: int = Depends(get_user(PrincipalField.ID)),
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Permanently delete a bookmark."""
    try:
        await bookmark_service.delete_bookmark(db, user_id, bookmark_id)
    except BookmarkAccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
