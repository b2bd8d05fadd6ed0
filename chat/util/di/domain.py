"""Domain layer DI providers."""

from dishka import Scope, provide

from chat.config import AuthSettings, MessageSettings
from chat.domain.repository import MessageRepository
from chat.domain.service import JWTService, MessageService
from chat.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_message_service(
        self, message_repository: MessageRepository, settings: MessageSettings
    ) -> MessageService:
        """Provide message domain service."""
        return MessageService(message_repository=message_repository, settings=settings)
