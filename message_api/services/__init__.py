"""Service layer for the Message API."""

from message_api.services.message_service import DatabaseMessageService, MessageService

__all__ = ["MessageService", "DatabaseMessageService"]
