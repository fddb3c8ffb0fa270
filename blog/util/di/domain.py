"""Domain layer DI providers."""

from dishka import Scope, provide

from blog.config import AuthorSettings, AuthSettings
from blog.domain.repository import PostRepository, UserRepository
from blog.domain.service import (
    CommentService,
    DisplayNameCache,
    JWTService,
    PostService,
    UserService,
)
from blog.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_display_name_cache(self, author_settings: AuthorSettings) -> DisplayNameCache:
        """Provide the process-wide display name cache."""
        return DisplayNameCache(
            ttl_seconds=author_settings.name_cache_ttl_seconds,
            max_entries=author_settings.name_cache_max_entries,
        )

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_comment_service(self, post_service: PostService) -> CommentService:
        """Provide comment domain service."""
        return CommentService(post_service=post_service)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, name_cache: DisplayNameCache
    ) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository, name_cache=name_cache)
