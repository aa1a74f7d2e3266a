"""Dependency functions for FastAPI routes."""

import logging
from typing import Annotated

from fastapi import Depends, Header, HTTPException, Request, status

from message_api.services import MessageService
from message_api.utils import is_accepted, resolve_request_format


_logger = logging.getLogger(__name__)


def get_message_service(request: Request) -> MessageService:
    """Return the MessageService the application was created with.

    Raises:
        RuntimeError: If the application has no service configured
    """
    service = getattr(request.app.state, "message_service", None)
    if service is None:
        raise RuntimeError("No MessageService configured on the application")
    return service


async def require_json_body(
    request: Request,
    content_type: Annotated[str | None, Header()] = None,
) -> None:
    """Reject request bodies that are not JSON.

    Runs before the body is validated, so the service is never reached for
    an unsupported payload.

    Raises:
        HTTPException 415: If the Content-Type does not resolve to JSON
    """
    request_format = resolve_request_format(content_type)
    if not is_accepted(request_format):
        _logger.warning(
            f"Rejected {request.method} {request.url.path}: unsupported content type {content_type!r}"
        )
        raise HTTPException(
            status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
            detail=f"Unsupported media type '{content_type}'. Use 'application/json'.",
        )


# Type aliases for cleaner dependency injection
MessageServiceDep = Annotated[MessageService, Depends(get_message_service)]
JsonBody = Depends(require_json_body)
