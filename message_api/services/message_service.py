"""Service layer for message-related business logic."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from uuid import UUID

from message_api import crud
from message_api.exceptions import MessageNotFoundError
from message_api.models.message import Message


class MessageService(ABC):
    """Operations the ``/messages`` endpoints delegate to.

    Implementations raise ``MessageNotFoundError`` whenever the requested id
    does not exist.
    """

    @abstractmethod
    def register_message(self, message: Message) -> Message:
        """Store a new message and return it with its assigned id."""

    @abstractmethod
    def get_message(self, message_id: UUID) -> Message:
        """Return the message with the given id."""

    @abstractmethod
    def update_message(self, message_id: UUID, message: Message) -> Message:
        """Replace the content of an existing message and return it."""

    @abstractmethod
    def delete_message(self, message_id: UUID) -> None:
        """Remove the message with the given id."""

    @abstractmethod
    def list_messages(self) -> list[Message]:
        """Return every stored message."""


class DatabaseMessageService(MessageService):
    """MessageService backed by the relational store in ``message_api.database``."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def register_message(self, message: Message) -> Message:
        # Ids are always minted here; a client-supplied id is ignored.
        record = crud.create_message(username=message.username, content=message.content)
        self._logger.info(f"Registered message {record.id} from {record.username}")
        return Message.model_validate(record)

    def get_message(self, message_id: UUID) -> Message:
        record = crud.get_message(str(message_id))
        if record is None:
            raise MessageNotFoundError(message_id)
        return Message.model_validate(record)

    def update_message(self, message_id: UUID, message: Message) -> Message:
        record = crud.update_message(
            str(message_id),
            username=message.username,
            content=message.content,
        )
        if record is None:
            raise MessageNotFoundError(message_id)
        self._logger.info(f"Updated message {message_id}")
        return Message.model_validate(record)

    def delete_message(self, message_id: UUID) -> None:
        if not crud.delete_message(str(message_id)):
            raise MessageNotFoundError(message_id)
        self._logger.info(f"Deleted message {message_id}")

    def list_messages(self) -> list[Message]:
        records = crud.get_all_messages()
        self._logger.debug(f"Listing {len(records)} messages")
        return [Message.model_validate(record) for record in records]
