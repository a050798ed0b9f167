"""Use case providers."""

from dishka import Scope, provide_all

from forum.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    SignUpUseCase,
)
from forum.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
)
from forum.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from forum.application.usecase.vote import VoteOnPostUseCase
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """One instance of each use case per request."""

    scope = Scope.REQUEST

    accounts = provide_all(SignUpUseCase, LoginUseCase, GetCurrentUserUseCase)

    posts = provide_all(
        ListPostsUseCase,
        GetPostUseCase,
        CreatePostUseCase,
        UpdatePostUseCase,
        DeletePostUseCase,
    )

    comments = provide_all(CreateCommentUseCase, DeleteCommentUseCase)

    votes = provide_all(VoteOnPostUseCase)
