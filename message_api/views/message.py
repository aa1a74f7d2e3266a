from __future__ import annotations

import logging
from uuid import UUID

from fastapi import APIRouter, HTTPException, Response, status

from message_api.dependencies import JsonBody, MessageServiceDep
from message_api.exceptions import MessageIdMismatchError, MessageNotFoundError
from message_api.models.message import Message


router = APIRouter(prefix="/messages", tags=["messages"])

_logger = logging.getLogger(__name__)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=Message,
    dependencies=[JsonBody],
)
def register_message(payload: Message, service: MessageServiceDep) -> Message:
    """Create a message. The id is assigned by the server.

    Returns:
    - 201: The created message
    - 415: Body is not JSON
    """
    return service.register_message(payload)


@router.get("", status_code=status.HTTP_200_OK, response_model=list[Message])
def list_messages(service: MessageServiceDep) -> list[Message]:
    """HTTP endpoint to list all messages."""
    return service.list_messages()


@router.get("/{message_id}", status_code=status.HTTP_200_OK, response_model=Message)
def get_message(message_id: UUID, service: MessageServiceDep) -> Message:
    """Fetch a single message.

    Returns:
    - 200: The message
    - 400: No message with this id
    """
    try:
        return service.get_message(message_id)
    except MessageNotFoundError as exc:
        _logger.warning(f"Lookup of unknown message {message_id}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc


@router.put(
    "/{message_id}",
    status_code=status.HTTP_200_OK,
    response_model=Message,
    dependencies=[JsonBody],
)
def update_message(message_id: UUID, payload: Message, service: MessageServiceDep) -> Message:
    """Replace the username and content of a message.

    The body must carry the same id as the path.

    Returns:
    - 200: The updated message
    - 400: Path id and body id differ
    - 404: No message with this id
    - 415: Body is not JSON
    """
    try:
        if payload.id != message_id:
            raise MessageIdMismatchError(message_id, payload.id)
        return service.update_message(message_id, payload)

    except MessageIdMismatchError as exc:
        _logger.warning(str(exc))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    except MessageNotFoundError as exc:
        _logger.warning(f"Update of unknown message {message_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc


@router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_message(message_id: UUID, service: MessageServiceDep) -> Response:
    """HTTP endpoint to delete a message by id."""
    try:
        service.delete_message(message_id)
    except MessageNotFoundError as exc:
        _logger.warning(f"Delete of unknown message {message_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
