import pytest

from graphcontact.exceptions import InvalidArgumentError
from graphcontact.models.contacts import EmailPrecedence
from conftest import GRAPH_B2C_USER, GRAPH_MEMBER_USER


class TestExtractContactInfo:
    def test_returns_dict(self):
        from graphcontact.mcp_server import extract_contact_info
        result = extract_contact_info.fn(user=GRAPH_MEMBER_USER)
        assert result == {"email": "AdeleV@contoso.com", "first_name": "Adele", "last_name": "Vance"}

    def test_identity_first(self):
        from graphcontact.mcp_server import extract_contact_info
        result = extract_contact_info.fn(user=GRAPH_B2C_USER, precedence="identity_first")
        assert result["email"] == "jane.public@contoso.com"

    def test_uses_configured_precedence(self, mocker):
        svc = mocker.patch("graphcontact.mcp_server.contacts_service")
        from graphcontact.mcp_server import extract_contact_info
        extract_contact_info.fn(user={})
        svc.extract_contact_info.assert_called_once_with({}, EmailPrecedence.DIRECTORY_FIRST)

    def test_none_returns_error_dict(self):
        from graphcontact.mcp_server import extract_contact_info
        result = extract_contact_info.fn(user=None)
        assert result["error"] == "invalid_argument"
        assert "None" in result["message"]

    def test_bad_precedence_returns_error_dict(self):
        from graphcontact.mcp_server import extract_contact_info
        result = extract_contact_info.fn(user={}, precedence="newest")
        assert result["error"] == "invalid_argument"


class TestHandleMcpError:
    @pytest.mark.parametrize(
        "exc,code",
        [(InvalidArgumentError("bad"), "invalid_argument"), (RuntimeError("boom"), "unknown_error")],
    )
    def test_error_codes(self, exc, code):
        from graphcontact.mcp_server import _handle_mcp_error
        assert _handle_mcp_error(exc)["error"] == code
