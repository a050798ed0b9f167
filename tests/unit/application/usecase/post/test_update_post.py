"""Unit tests for the post editing use cases."""

from uuid import UUID, uuid4

import pytest

from forum.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from forum.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from forum.domain.repository import PostRepository
from forum.domain.value import PostId, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _create(unit_env, author_id: UserId) -> PostId:
    create_post = await unit_env.get(CreatePostUseCase)
    response = await create_post.execute(
        CreatePostRequest(title="Test Post", content="Body", author_id=str(author_id))
    )
    return PostId(UUID(response.id))


class TestUpdatePostUseCase:
    """Tests for UpdatePostUseCase."""

    @pytest.mark.asyncio
    async def test_author_updates_title(self, unit_env):
        """Author can rename a post; content is kept."""
        # Arrange
        update_post = await unit_env.get(UpdatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        author_id = UserId(uuid4())
        post_id = await _create(unit_env, author_id)

        # Act
        response = await update_post.execute(
            UpdatePostRequest(
                post_id=str(post_id), user_id=str(author_id), title="Renamed"
            )
        )

        # Assert
        assert response.message == "Post updated"
        assert response.id == str(post_id)
        saved = await post_repo.find_by_id(post_id)
        assert saved.title == "Renamed"
        assert saved.content == "Body"

    @pytest.mark.asyncio
    async def test_non_author_cannot_update(self, unit_env):
        update_post = await unit_env.get(UpdatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        post_id = await _create(unit_env, UserId(uuid4()))

        with pytest.raises(NotAuthorizedError):
            await update_post.execute(
                UpdatePostRequest(
                    post_id=str(post_id), user_id=str(uuid4()), title="Hijacked"
                )
            )

        assert (await post_repo.find_by_id(post_id)).title == "Test Post"

    @pytest.mark.asyncio
    async def test_update_missing_post(self, unit_env):
        update_post = await unit_env.get(UpdatePostUseCase)

        with pytest.raises(NotFoundError):
            await update_post.execute(
                UpdatePostRequest(
                    post_id=str(uuid4()), user_id=str(uuid4()), content="x"
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_post_id(self, unit_env):
        update_post = await unit_env.get(UpdatePostUseCase)

        with pytest.raises(ValidationError, match="Invalid post id"):
            await update_post.execute(
                UpdatePostRequest(post_id="123", user_id=str(uuid4()), title="x")
            )


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_author_deletes_post(self, unit_env):
        delete_post = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        author_id = UserId(uuid4())
        post_id = await _create(unit_env, author_id)

        response = await delete_post.execute(
            DeletePostRequest(post_id=str(post_id), user_id=str(author_id))
        )

        assert response.message == "Post deleted"
        assert await post_repo.find_by_id(post_id) is None

    @pytest.mark.asyncio
    async def test_non_author_cannot_delete(self, unit_env):
        delete_post = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        post_id = await _create(unit_env, UserId(uuid4()))

        with pytest.raises(NotAuthorizedError):
            await delete_post.execute(
                DeletePostRequest(post_id=str(post_id), user_id=str(uuid4()))
            )

        assert await post_repo.find_by_id(post_id) is not None
