"""Tests for request body format resolution."""

import pytest

from message_api.utils import RequestFormat, is_accepted, resolve_request_format


class TestResolveRequestFormat:
    @pytest.mark.parametrize(
        "content_type",
        ["application/json", "Application/JSON", "application/json; charset=utf-8", "application/merge-patch+json"],
    )
    def test_json_types(self, content_type: str) -> None:
        assert resolve_request_format(content_type) is RequestFormat.JSON

    @pytest.mark.parametrize("content_type", ["application/xml", "text/xml", "application/atom+xml; charset=utf-8"])
    def test_xml_types(self, content_type: str) -> None:
        assert resolve_request_format(content_type) is RequestFormat.XML

    @pytest.mark.parametrize("content_type", [None, "", "   ", "text/plain", "multipart/form-data; boundary=x"])
    def test_unknown_types(self, content_type: str | None) -> None:
        assert resolve_request_format(content_type) is RequestFormat.UNKNOWN


def test_only_json_is_accepted() -> None:
    assert is_accepted(RequestFormat.JSON)
    assert not is_accepted(RequestFormat.XML)
    assert not is_accepted(RequestFormat.UNKNOWN)
