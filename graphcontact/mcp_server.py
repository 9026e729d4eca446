from fastmcp import FastMCP

from graphcontact.config import get_settings
from graphcontact.exceptions import InvalidArgumentError
from graphcontact.services import contacts as contacts_service

mcp = FastMCP("Graphcontact")


def _handle_mcp_error(e: Exception) -> dict:
    """Convert exceptions to agent-friendly error dicts."""
    if isinstance(e, InvalidArgumentError):
        return {"error": "invalid_argument", "message": str(e), "action": "Pass a Microsoft Graph user object"}
    return {"error": "unknown_error", "message": str(e)}


# --- Contact tools ---

@mcp.tool
def extract_contact_info(user: dict | None, precedence: str | None = None) -> dict:
    """Get the best email address, first name and last name for a Microsoft Graph user.
    Pass the user JSON as returned by Graph (mail, userPrincipalName, otherMails, identities,
    givenName, surname, displayName). precedence is 'directory_first' (default) or 'identity_first'."""
    try:
        if precedence is None:
            precedence = get_settings().email_precedence
        contact = contacts_service.extract_contact_info(user, precedence)
        return contact.model_dump()
    except InvalidArgumentError as e:
        return _handle_mcp_error(e)
