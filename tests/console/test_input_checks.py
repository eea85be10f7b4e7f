"""Tests for input_checks — project name rules, URL detection, display links."""

import pytest

from adogen.input_checks import (
    MAX_PROJECT_NAME_LENGTH,
    check_project_name,
    extract_display_link,
    is_absolute_url,
)


@pytest.mark.unit
class TestCheckProjectName:

    @pytest.mark.parametrize("name", [
        "Demo1", "My Project", "parts-unlimited", "a.b", "x" * MAX_PROJECT_NAME_LENGTH,
    ])
    def test_accepts_valid_names(self, name):
        assert check_project_name(name) is True

    @pytest.mark.parametrize("name", [
        "", "   ", "bad/name", "bad\\name", "what?", "a:b", "semi;colon",
        "hash#tag", "pipe|d", "quote\"d", "per%cent", "amp&ersand",
    ])
    def test_rejects_blank_and_invalid_characters(self, name):
        assert check_project_name(name) is False

    def test_rejects_names_over_length_limit(self):
        assert check_project_name("x" * (MAX_PROJECT_NAME_LENGTH + 1)) is False

    @pytest.mark.parametrize("name", ["_hidden", ".dotted", "trailing."])
    def test_rejects_leading_and_trailing_markers(self, name):
        assert check_project_name(name) is False

    @pytest.mark.parametrize("name", ["CON", "aux", "Com1", "LPT9", "App_Data", "web.config", "_vti_bin"])
    def test_rejects_reserved_names(self, name):
        assert check_project_name(name) is False

    def test_rejects_control_characters(self):
        assert check_project_name("tab\tname") is False


@pytest.mark.unit
class TestIsAbsoluteUrl:

    @pytest.mark.parametrize("text", [
        "https://dev.azure.com/contoso",
        "http://contoso.visualstudio.com",
        "ftp://example.org/path",
        "HTTPS://DEV.AZURE.COM/",
        "file:///tmp/contoso",
        "mailto:admin@contoso.com",
        "urn:isbn:12345",
    ])
    def test_detects_absolute_urls(self, text):
        assert is_absolute_url(text) is True

    @pytest.mark.parametrize("text", [
        "contoso", "dev.azure.com/contoso", "", "contoso org", "https:", "1abc:def",
    ])
    def test_plain_names_are_not_urls(self, text):
        assert is_absolute_url(text) is False


@pytest.mark.unit
class TestExtractDisplayLink:

    def test_returns_href_from_anchor(self):
        raw = "<a href='https://example.com/ext' target='_blank'>Ext</a>"
        assert extract_display_link(raw) == "https://example.com/ext"

    def test_unescapes_entities_before_matching(self):
        raw = "<a href=&quot;https://example.com/license?a=1&amp;b=2&quot;>License</a>"
        assert extract_display_link(raw) == "https://example.com/license?a=1&b=2"

    def test_plain_url_is_returned_trimmed(self):
        assert extract_display_link("  https://example.com  ") == "https://example.com"

    def test_empty_input_gives_empty_string(self):
        assert extract_display_link(None) == ""
        assert extract_display_link("") == ""
