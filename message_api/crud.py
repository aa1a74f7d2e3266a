from __future__ import annotations

from uuid import uuid4

from message_api.database import MessageRecord, session_scope


# ============================================================================
# MESSAGE CRUD OPERATIONS
# ============================================================================


def create_message(username: str, content: str) -> MessageRecord:
    """Create a new message with a freshly generated UUID.

    Args:
        username: Name of the message author
        content: Body of the message

    Returns:
        The created MessageRecord object
    """
    with session_scope() as session:
        record = MessageRecord(
            id=str(uuid4()),
            username=username,
            content=content,
        )
        session.add(record)
        session.flush()
        session.refresh(record)
        return record


def get_message(message_id: str) -> MessageRecord | None:
    """Retrieve a message by id.

    Args:
        message_id: The UUID of the message

    Returns:
        The MessageRecord object or None if not found
    """
    with session_scope() as session:
        return session.query(MessageRecord).filter_by(id=message_id).first()


def get_all_messages() -> list[MessageRecord]:
    """Retrieve all messages, oldest first.

    Returns:
        List of all MessageRecord objects
    """
    with session_scope() as session:
        return (
            session.query(MessageRecord)
            .order_by(MessageRecord.seq)
            .all()
        )


def update_message(message_id: str, username: str, content: str) -> MessageRecord | None:
    """Overwrite the author and body of an existing message.

    Args:
        message_id: The UUID of the message
        username: New author name
        content: New message body

    Returns:
        The updated MessageRecord object, or None if not found
    """
    with session_scope() as session:
        record = session.query(MessageRecord).filter_by(id=message_id).first()
        if record is None:
            return None
        record.username = username
        record.content = content
        session.flush()
        session.refresh(record)
        return record


def delete_message(message_id: str) -> bool:
    """Delete a message by id.

    Args:
        message_id: The UUID of the message

    Returns:
        True if the message was deleted, False if not found
    """
    with session_scope() as session:
        record = session.query(MessageRecord).filter_by(id=message_id).first()
        if record is None:
            return False
        session.delete(record)
        return True
