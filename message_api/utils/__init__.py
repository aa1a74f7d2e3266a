"""Utility helpers for the Message API."""

from message_api.utils.content_type import RequestFormat, is_accepted, resolve_request_format

__all__ = ["RequestFormat", "is_accepted", "resolve_request_format"]
