"""Domain service providers."""

from dishka import Scope, provide, provide_all

from forum.domain.service import (
    CommentService,
    FeedService,
    JWTService,
    PostService,
    UserService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services, wired from their constructor type hints.

    Services that hold repositories live for one request, sharing that
    request's database session. Token handling only needs settings and is
    built once.
    """

    scope = Scope.REQUEST

    jwt_service = provide(JWTService, scope=Scope.APP)

    services = provide_all(
        UserService,
        PostService,
        FeedService,
        CommentService,
        VoteService,
    )
