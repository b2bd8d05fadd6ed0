"""Message use cases."""

from .common import MessageView, TagGroupView, TagInput
from .delete_message import DeleteMessageRequest, DeleteMessageUseCase
from .get_message import GetMessageRequest, GetMessageUseCase
from .get_messages_by_tags import GetMessagesByTagsRequest, GetMessagesByTagsUseCase
from .like_message import LikeMessageRequest, LikeMessageUseCase, UnlikeMessageUseCase
from .list_messages import (
    ListMessagesRequest,
    ListMessagesResponse,
    ListMessagesUseCase,
)
from .resolve_message import ResolveMessageRequest, ResolveMessageUseCase
from .send_message import SendMessageRequest, SendMessageUseCase
from .update_message_tags import UpdateMessageTagsRequest, UpdateMessageTagsUseCase

__all__ = [
    "DeleteMessageRequest",
    "DeleteMessageUseCase",
    "GetMessageRequest",
    "GetMessageUseCase",
    "GetMessagesByTagsRequest",
    "GetMessagesByTagsUseCase",
    "LikeMessageRequest",
    "LikeMessageUseCase",
    "ListMessagesRequest",
    "ListMessagesResponse",
    "ListMessagesUseCase",
    "MessageView",
    "ResolveMessageRequest",
    "ResolveMessageUseCase",
    "SendMessageRequest",
    "SendMessageUseCase",
    "TagGroupView",
    "TagInput",
    "UnlikeMessageUseCase",
    "UpdateMessageTagsRequest",
    "UpdateMessageTagsUseCase",
]
