"""Application layer DI providers."""

from dishka import Scope, provide

from chat.application.usecase.message import (
    DeleteMessageUseCase,
    GetMessageUseCase,
    GetMessagesByTagsUseCase,
    LikeMessageUseCase,
    ListMessagesUseCase,
    ResolveMessageUseCase,
    SendMessageUseCase,
    UnlikeMessageUseCase,
    UpdateMessageTagsUseCase,
)
from chat.domain.service import MessageService
from chat.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_send_message_use_case(
        self, message_service: MessageService
    ) -> SendMessageUseCase:
        """Provide send message use case."""
        return SendMessageUseCase(message_service=message_service)

    @provide
    def get_get_message_use_case(
        self, message_service: MessageService
    ) -> GetMessageUseCase:
        """Provide get message use case."""
        return GetMessageUseCase(message_service=message_service)

    @provide
    def get_list_messages_use_case(
        self, message_service: MessageService
    ) -> ListMessagesUseCase:
        """Provide list messages use case."""
        return ListMessagesUseCase(message_service=message_service)

    @provide
    def get_update_message_tags_use_case(
        self, message_service: MessageService
    ) -> UpdateMessageTagsUseCase:
        """Provide update message tags use case."""
        return UpdateMessageTagsUseCase(message_service=message_service)

    @provide
    def get_like_message_use_case(
        self, message_service: MessageService
    ) -> LikeMessageUseCase:
        """Provide like message use case."""
        return LikeMessageUseCase(message_service=message_service)

    @provide
    def get_unlike_message_use_case(
        self, message_service: MessageService
    ) -> UnlikeMessageUseCase:
        """Provide unlike message use case."""
        return UnlikeMessageUseCase(message_service=message_service)

    @provide
    def get_resolve_message_use_case(
        self, message_service: MessageService
    ) -> ResolveMessageUseCase:
        """Provide resolve message use case."""
        return ResolveMessageUseCase(message_service=message_service)

    @provide
    def get_delete_message_use_case(
        self, message_service: MessageService
    ) -> DeleteMessageUseCase:
        """Provide delete message use case."""
        return DeleteMessageUseCase(message_service=message_service)

    @provide
    def get_get_messages_by_tags_use_case(
        self, message_service: MessageService
    ) -> GetMessagesByTagsUseCase:
        """Provide get messages by tags use case."""
        return GetMessagesByTagsUseCase(message_service=message_service)
