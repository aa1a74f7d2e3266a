"""Request body format detection.

The ``Content-Type`` header is resolved once into a ``RequestFormat`` and the
accept/reject decision is made on that value alone. Only JSON bodies are
accepted; XML and anything unrecognised are rejected.
"""

from __future__ import annotations

from enum import Enum


class RequestFormat(str, Enum):
    JSON = "json"
    XML = "xml"
    UNKNOWN = "unknown"


_JSON_TYPES = {"application/json"}
_XML_TYPES = {"application/xml", "text/xml"}

_ACCEPTED_FORMATS = frozenset({RequestFormat.JSON})


def _media_type(content_type: str) -> str:
    # Drop parameters such as "; charset=utf-8"
    return content_type.split(";", 1)[0].strip().lower()


def resolve_request_format(content_type: str | None) -> RequestFormat:
    """Map a raw ``Content-Type`` header value to a ``RequestFormat``.

    Structured syntax suffixes are honoured, so ``application/merge-patch+json``
    resolves to JSON and ``application/atom+xml`` to XML.

    Returns UNKNOWN if the header is None or empty/whitespace.
    """
    if content_type is None:
        return RequestFormat.UNKNOWN
    media_type = _media_type(content_type)
    if not media_type:
        return RequestFormat.UNKNOWN

    if media_type in _JSON_TYPES or media_type.endswith("+json"):
        return RequestFormat.JSON
    if media_type in _XML_TYPES or media_type.endswith("+xml"):
        return RequestFormat.XML
    return RequestFormat.UNKNOWN


def is_accepted(request_format: RequestFormat) -> bool:
    """Return True if a body in ``request_format`` may be processed."""
    return request_format in _ACCEPTED_FORMATS
