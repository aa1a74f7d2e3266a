"""Message API: a CRUD HTTP service for messages."""

__version__ = "1.0.0"
