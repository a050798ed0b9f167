"""Publishing a post."""

from pydantic import BaseModel, Field

from forum.application.usecase.common import ResponseModel, parse_id
from forum.domain.service import PostService
from forum.domain.value import UserId


class CreatePostRequest(BaseModel):
    """A new post; ``author_id`` is the authenticated caller."""

    title: str = Field(min_length=1, max_length=300)
    content: str | None = Field(default=None, max_length=10000)
    author_id: str


class CreatePostResponse(ResponseModel):
    id: str


class CreatePostUseCase:
    """Publishes a post with no votes, owned by the requester."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        author_id = UserId(parse_id(request.author_id, "user"))
        post = await self.post_service.create_post(
            title=request.title, content=request.content, author_id=author_id
        )
        return CreatePostResponse(id=str(post.id))
