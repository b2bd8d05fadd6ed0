"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .message_service import MessageService

__all__ = [
    "JWTService",
    "MessageService",
    "Service",
]
