"""View layer (routing) for the Message API."""


from .health import router as health_router
from .message import router as message_router


__all__ = [
    "health_router",
    "message_router",
]
