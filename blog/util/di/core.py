"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from blog.config import AuthorSettings, AuthSettings, Settings
from blog.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_author_settings(self, settings: Settings) -> AuthorSettings:
        """Provide author name resolution settings."""
        return settings.authors
