"""Tests for provisioning.request.build_request — required fields and flags."""

import pytest

from adogen.auth.scheme import AuthResult, AuthScheme
from adogen.catalog.extensions import ExtensionEntry
from adogen.errors import ValidationError
from adogen.provisioning.request import build_request

_AUTH = AuthResult("abc123", "contoso", AuthScheme.BASIC)


@pytest.mark.unit
class TestBuildRequest:

    def test_builds_request_from_auth_and_selection(self):
        request = build_request("sid", _AUTH, "Demo1", "Scrum", "scrum-template")
        assert request.session_id == "sid"
        assert request.organization_name == "contoso"
        assert request.access_token == "abc123"
        assert request.project_name == "Demo1"
        assert request.template_folder == "scrum-template"
        assert request.auth_scheme == AuthScheme.BASIC
        assert request.extensions_present is False
        assert request.consent_granted is False

    def test_extension_flags_are_independent(self):
        entry = ExtensionEntry("Ext", "link", "license")
        request = build_request("sid", _AUTH, "Demo1", "Kanban", "kanban-template",
                                extensions=[entry], consent_granted=False)
        assert request.extensions_present is True
        assert request.consent_granted is False
        assert request.extensions == (entry,)

    def test_token_is_not_in_repr(self):
        request = build_request("sid", _AUTH, "Demo1", "Scrum", "scrum-template")
        assert "abc123" not in repr(request)

    @pytest.mark.parametrize("auth,project_name", [
        (None, "Demo1"),
        (AuthResult("", "contoso", AuthScheme.BASIC), "Demo1"),
        (AuthResult("abc123", " ", AuthScheme.BASIC), "Demo1"),
        (_AUTH, ""),
        (_AUTH, None),
    ])
    def test_missing_fields_raise_validation_error(self, auth, project_name):
        with pytest.raises(ValidationError):
            build_request("sid", auth, project_name, "Scrum", "scrum-template")
