"""Custom exceptions for the Message API."""

from __future__ import annotations

from uuid import UUID


class MessageNotFoundError(LookupError):
    """Raised when a message with the requested id does not exist."""

    def __init__(self, message_id: UUID | str) -> None:
        super().__init__(f"Message '{message_id}' not found.")
        self.message_id = message_id


class MessageIdMismatchError(ValueError):
    """Raised when the id in the request path disagrees with the id in the body."""

    def __init__(self, path_id: UUID | str, body_id: UUID | str | None) -> None:
        super().__init__(f"Path id '{path_id}' does not match body id '{body_id}'.")
        self.path_id = path_id
        self.body_id = body_id
