"""
Blog Routes.

Summary
-------
Endpoints include:
  - List blogs with their owners
  - Create blog (bearer token required)
  - Update blog
  - Delete blog (bearer token required, owner only)

Update deliberately performs no ownership check and replaces every mutable
field, so a field omitted from the body is cleared.
"""

from logging import getLogger
from uuid import UUID

from fastapi import APIRouter, Request
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from bloglist.configs import file_logger
from bloglist.dependencies import BlogRepoDep, CurrentUserDep, UserRepoDep
from bloglist.errors.auth import NotOwnerError
from bloglist.models import BlogDB, UserDB
from bloglist.schemas import (
    BlogCreate,
    BlogResponse,
    BlogUpdate,
    BlogWithOwnerResponse,
    OwnerSummary,
)
from bloglist.utils.helpers import host

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

logger = file_logger(getLogger(__name__))

BLOG_EXAMPLE = {
    "id": "550e8400-e29b-41d4-a716-446655440000",
    "title": "React patterns",
    "author": "Michael Chan",
    "url": "https://reactpatterns.com/",
    "likes": 7,
    "ownerId": "123e4567-e89b-12d3-a456-426614174000",
    "createdAt": "2025-01-01T12:00:00Z",
}

UNAUTHORIZED_RESPONSE = {
    "description": "Missing, invalid or expired token",
    "content": {"application/json": {"example": {"error": "token missing or invalid"}}},
}


def to_listing(blog: BlogDB, owner: UserDB | None) -> BlogWithOwnerResponse:
    """
    Build a listing entry from a blog row and its owner row.

    Parameters
    ----------
    blog : BlogDB
        Database blog entity.
    owner : UserDB | None
        Owning user, or None when the owner row is gone.

    Returns
    -------
    BlogWithOwnerResponse
        Blog with the owner's summary embedded.
    """
    listing = BlogWithOwnerResponse.model_validate(blog)
    listing.user = OwnerSummary.model_validate(owner) if owner else None
    return listing


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogWithOwnerResponse],
    summary="List all blogs",
    description="Return every blog together with a summary of the user who created it.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": [
                        {
                            **BLOG_EXAMPLE,
                            "user": {
                                "id": "123e4567-e89b-12d3-a456-426614174000",
                                "username": "mluukkai",
                                "name": "Matti Luukkainen",
                            },
                        },
                    ],
                },
            },
        },
    },
    operation_id="blogs_list",
)
async def list_blogs(repo: BlogRepoDep) -> list[BlogWithOwnerResponse]:
    """
    List all blogs with owner summaries.

    Parameters
    ----------
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    list[BlogWithOwnerResponse]
        All blogs, oldest first; empty when there are none.
    """
    return [to_listing(blog, owner) for blog, owner in await repo.get_all_with_owner()]


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog",
    description=(
        "Create a blog owned by the caller. `title`, `author` and `url` must be "
        "non-empty; `likes` defaults to 0."
    ),
    responses={
        201: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: {
            "description": "Invalid body",
            "content": {"application/json": {"example": {"error": "title: Field required"}}},
        },
        401: UNAUTHORIZED_RESPONSE,
    },
    operation_id="blogs_create",
)
async def create_blog(
    request: Request,
    current_user: CurrentUserDep,
    blog: BlogCreate,
    repo: BlogRepoDep,
    user_repo: UserRepoDep,
) -> BlogResponse:
    """
    Create a blog and record it on the caller's account.

    Parameters
    ----------
    request : Request
        Current request context.
    current_user : UserDB
        Authenticated caller; becomes the owner.
    blog : BlogCreate
        Validated blog body.
    repo : BlogRepository
        Blog repository dependency.
    user_repo : UserRepository
        User repository dependency.

    Returns
    -------
    BlogResponse
        The created blog.
    """
    db_blog = await repo.create(blog, owner_id=current_user.id)
    await user_repo.add_blog_id(current_user, db_blog.id)

    logger.info(f"Blog {db_blog.id} created by {current_user.username} from ip: {host(request)}")
    return BlogResponse.model_validate(db_blog)


@router.put(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse | None,
    summary="Update a blog",
    description=(
        "Replace `title`, `author`, `url` and `likes` of a blog. Fields missing "
        "from the body are cleared. Returns `null` when the blog does not exist."
    ),
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: {
            "description": "Malformed id or body",
            "content": {
                "application/json": {
                    "example": {"error": "blog_id: Input should be a valid UUID"},
                },
            },
        },
    },
    operation_id="blogs_update",
)
async def update_blog(
    blog_id: UUID,
    blog: BlogUpdate,
    repo: BlogRepoDep,
) -> BlogResponse | None:
    """
    Update a blog's mutable fields.

    Parameters
    ----------
    blog_id : UUID
        Blog identifier.
    blog : BlogUpdate
        Replacement values.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    BlogResponse | None
        The updated blog, or None if no blog has this id.
    """
    db_blog = await repo.update(blog_id, blog)
    if db_blog is None:
        logger.info(f"Update skipped, blog {blog_id} does not exist")
        return None
    return BlogResponse.model_validate(db_blog)


@router.delete(
    "/{blog_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete a blog",
    description="Delete a blog created by the caller. Deleting a missing blog succeeds.",
    responses={
        204: {"description": "Blog deleted or already absent"},
        401: {
            "description": "Missing token, or caller is not the blog's creator",
            "content": {
                "application/json": {
                    "example": {"error": "only the creator can delete a blog"},
                },
            },
        },
    },
    operation_id="blogs_delete",
)
async def delete_blog(
    request: Request,
    blog_id: UUID,
    current_user: CurrentUserDep,
    repo: BlogRepoDep,
    user_repo: UserRepoDep,
) -> None:
    """
    Delete blog by ID.

    Parameters
    ----------
    request : Request
        Current request context.
    blog_id : UUID
        Blog identifier.
    current_user : UserDB
        Authenticated caller.
    repo : BlogRepository
        Blog repository dependency.
    user_repo : UserRepository
        User repository dependency.

    Raises
    ------
    NotOwnerError
        If the blog exists and belongs to another user.
    """
    existing = await repo.get_by_id(blog_id)
    if existing is None:
        return

    if existing.owner_id != current_user.id:
        logger.warning(
            f"User {current_user.username} tried to delete blog {blog_id} "
            f"owned by {existing.owner_id} from ip: {host(request)}",
        )
        raise NotOwnerError

    await repo.delete(blog_id)
    await user_repo.remove_blog_id(current_user, blog_id)
    logger.info(f"Blog {blog_id} deleted by {current_user.username}")
