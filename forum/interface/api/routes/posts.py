"""Post and comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query, status
from pydantic import BaseModel, Field

from forum.application.usecase.auth import GetCurrentUserUseCase
from forum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from forum.application.usecase.common import MessageResponse
from forum.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from forum.interface.api.errors import http_errors
from forum.interface.api.security import require_user

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)

CurrentUserUseCase = FromDishka[GetCurrentUserUseCase]


class PostDraft(BaseModel):
    """Body of ``POST /posts``."""

    title: str = Field(min_length=1, max_length=300)
    content: str | None = Field(default=None, max_length=10000)


class PostEdit(BaseModel):
    """Body of ``PUT /posts/{post_id}``; omitted fields stay as they are."""

    title: str | None = Field(default=None, max_length=300)
    content: str | None = Field(default=None, max_length=10000)


class CommentDraft(BaseModel):
    """Body of ``POST /posts/{post_id}/comments``."""

    content: str = Field(min_length=1, max_length=10000)


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    use_case: FromDishka[ListPostsUseCase],
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
) -> ListPostsResponse:
    """One page of the ranked feed.

    ``page`` is 1-based and defaults to 1; ``limit`` defaults to 10. Blank
    values count as missing.
    ``nextPage`` is null on the last page.
    """
    with http_errors("list posts", page=str(page), limit=str(limit)):
        request = ListPostsRequest(page=page, limit=limit)
        return await use_case.execute(request)


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: str,
    use_case: FromDishka[GetPostUseCase],
) -> GetPostResponse:
    """A post in full, with its comments oldest first."""
    with http_errors("get post", post_id=post_id):
        return await use_case.execute(GetPostRequest(post_id=post_id))


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    body: PostDraft,
    use_case: FromDishka[CreatePostUseCase],
    current_user: CurrentUserUseCase,
    authorization: str | None = Header(default=None),
) -> CreatePostResponse:
    """Publish a post as the authenticated user."""
    user = await require_user(authorization, current_user)

    with http_errors("create post", user_id=user.id):
        return await use_case.execute(
            CreatePostRequest(title=body.title, content=body.content, author_id=user.id)
        )


@router.put("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: str,
    body: PostEdit,
    use_case: FromDishka[UpdatePostUseCase],
    current_user: CurrentUserUseCase,
    authorization: str | None = Header(default=None),
) -> UpdatePostResponse:
    """Edit a post's title and/or content. Author only."""
    user = await require_user(authorization, current_user)

    with http_errors("edit this post", post_id=post_id, user_id=user.id):
        return await use_case.execute(
            UpdatePostRequest(
                post_id=post_id,
                user_id=user.id,
                title=body.title,
                content=body.content,
            )
        )


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    use_case: FromDishka[DeletePostUseCase],
    current_user: CurrentUserUseCase,
    authorization: str | None = Header(default=None),
) -> MessageResponse:
    """Delete a post along with its comments. Author only."""
    user = await require_user(authorization, current_user)

    with http_errors("delete this post", post_id=post_id, user_id=user.id):
        return await use_case.execute(
            DeletePostRequest(post_id=post_id, user_id=user.id)
        )


@router.post(
    "/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    body: CommentDraft,
    use_case: FromDishka[CreateCommentUseCase],
    current_user: CurrentUserUseCase,
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Comment on a post as the authenticated user."""
    user = await require_user(authorization, current_user)

    with http_errors("create comment", post_id=post_id, user_id=user.id):
        return await use_case.execute(
            CreateCommentRequest(
                post_id=post_id, content=body.content, author_id=user.id
            )
        )


@router.delete("/{post_id}/comments/{comment_id}", response_model=MessageResponse)
async def delete_comment(
    post_id: str,
    comment_id: str,
    use_case: FromDishka[DeleteCommentUseCase],
    current_user: CurrentUserUseCase,
    authorization: str | None = Header(default=None),
) -> MessageResponse:
    """Delete a comment. Allowed for its author and the post's author."""
    user = await require_user(authorization, current_user)

    with http_errors(
        "delete this comment",
        post_id=post_id,
        comment_id=comment_id,
        user_id=user.id,
    ):
        return await use_case.execute(
            DeleteCommentRequest(
                post_id=post_id, comment_id=comment_id, user_id=user.id
            )
        )
