"""Pytest configuration for the Message API tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Generator
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from message_api.database import reset_database  # noqa: E402
from message_api.exceptions import MessageNotFoundError  # noqa: E402
from message_api.main import create_app  # noqa: E402
from message_api.models.message import Message  # noqa: E402
from message_api.services import MessageService  # noqa: E402


def make_message(**overrides) -> Message:
    """Build a message with default test values."""
    fields = {"username": "Name", "content": "Hello!"}
    fields.update(overrides)
    return Message(**fields)


class FakeMessageService(MessageService):
    """In-memory MessageService that records every call it receives.

    Each operation appends its arguments to ``calls[<operation>]``. Ids listed
    in ``missing`` make the lookup operations raise ``MessageNotFoundError``.
    """

    def __init__(self) -> None:
        self.messages: dict[UUID, Message] = {}
        self.missing: set[UUID] = set()
        self.calls: dict[str, list[tuple]] = {
            "register_message": [],
            "get_message": [],
            "update_message": [],
            "delete_message": [],
            "list_messages": [],
        }

    def _lookup(self, message_id: UUID) -> Message:
        if message_id in self.missing or message_id not in self.messages:
            raise MessageNotFoundError(message_id)
        return self.messages[message_id]

    def register_message(self, message: Message) -> Message:
        self.calls["register_message"].append((message,))
        created = message.model_copy(update={"id": uuid4()})
        self.messages[created.id] = created
        return created

    def get_message(self, message_id: UUID) -> Message:
        self.calls["get_message"].append((message_id,))
        return self._lookup(message_id)

    def update_message(self, message_id: UUID, message: Message) -> Message:
        self.calls["update_message"].append((message_id, message))
        self._lookup(message_id)
        self.messages[message_id] = message
        return message

    def delete_message(self, message_id: UUID) -> None:
        self.calls["delete_message"].append((message_id,))
        self._lookup(message_id)
        del self.messages[message_id]

    def list_messages(self) -> list[Message]:
        self.calls["list_messages"].append(())
        return list(self.messages.values())

    def add(self, message: Message) -> Message:
        """Seed a message without recording a call."""
        stored = message if message.id is not None else message.model_copy(update={"id": uuid4()})
        self.messages[stored.id] = stored
        return stored


@pytest.fixture()
def message_service() -> FakeMessageService:
    return FakeMessageService()


@pytest.fixture()
def client(message_service: FakeMessageService) -> Generator[TestClient, None, None]:
    app = create_app(message_service=message_service)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def database_url(tmp_path: Path) -> str:
    url = f"sqlite:///{tmp_path / 'messages-test.db'}"
    reset_database(url)
    return url


@pytest.fixture()
def db_client(database_url: str) -> Generator[TestClient, None, None]:
    app = create_app(database_url=database_url)
    with TestClient(app) as test_client:
        yield test_client
