"""Pydantic models that describe the message payloads exchanged over HTTP."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class Message(BaseModel):
    """A message resource as sent and received by the ``/messages`` endpoints."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID | None = Field(
        default=None,
        description="Server-assigned identifier; required on update and must match the path",
    )
    username: str = Field(..., min_length=1, max_length=128, description="Name of the message author")
    content: str = Field(..., min_length=1, description="Body of the message")
