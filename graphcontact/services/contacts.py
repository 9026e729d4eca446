"""Contact extraction from Microsoft Graph user records."""

import logging

from pydantic import ValidationError

from graphcontact.exceptions import InvalidArgumentError
from graphcontact.models.contacts import ContactInfo, EmailPrecedence
from graphcontact.models.graph import (
    EMAIL_ADDRESS_SIGN_IN,
    FEDERATED_SIGN_IN,
    GraphUser,
    SignInIdentity,
)

logger = logging.getLogger(__name__)


def _has_content(value: str | None) -> bool:
    return value is not None and bool(value.strip())


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


def _first_with_content(values: list[str | None] | None) -> str | None:
    for value in values or ():
        if _has_content(value):
            return value
    return None


def _email_from_identities(
    identities: list[SignInIdentity] | None, keep_first_federated: bool = False
) -> str | None:
    """Scan sign-in identities for an email.

    An ``emailAddress`` identity is authoritative and ends the scan. A federated
    identity whose id looks like an address is only a candidate: a later
    ``emailAddress`` identity still overrides it.
    """
    candidate = None
    for identity in identities or ():
        value = identity.issuer_assigned_id
        if not _has_content(value):
            continue
        if identity.sign_in_type == EMAIL_ADDRESS_SIGN_IN:
            return value
        if identity.sign_in_type == FEDERATED_SIGN_IN and "@" in value:
            if candidate is None or not keep_first_federated:
                candidate = value
    return candidate


def _resolve_email(user: GraphUser, precedence: EmailPrecedence) -> str | None:
    if precedence == EmailPrecedence.IDENTITY_FIRST:
        sources = [
            ("identities", _email_from_identities(user.identities, keep_first_federated=True)),
            ("mail", user.mail),
            ("userPrincipalName", user.user_principal_name),
        ]
    else:
        sources = [
            ("mail", user.mail),
            ("userPrincipalName", user.user_principal_name),
            ("otherMails", _first_with_content(user.other_mails)),
            ("identities", _email_from_identities(user.identities)),
        ]
    for name, value in sources:
        if _has_content(value):
            logger.debug("Resolved email from %s", name)
            return value
    logger.debug("No email found on user record")
    return None


def _resolve_names(user: GraphUser) -> tuple[str | None, str | None]:
    first, last = user.given_name, user.surname
    if _has_content(first) and _has_content(last):
        return first, last
    if not _has_content(user.display_name):
        return first, last

    # Middle tokens ("Mary Anne van der Woodsen") are dropped.
    tokens = user.display_name.split()
    if not _has_content(first):
        first = tokens[0]
    if len(tokens) > 1 and not _has_content(last):
        last = tokens[-1]
    return first, last


def extract_contact_info(
    user: GraphUser | dict | None,
    precedence: EmailPrecedence = EmailPrecedence.DIRECTORY_FIRST,
) -> ContactInfo:
    """Extract the best email, first name and last name from a Graph user.

    ``user`` may be a ``GraphUser`` or the raw JSON dict returned by Graph.
    Missing fields never raise; they yield ``None`` in the result. All returned
    strings are stripped, and blank values come back as ``None``.

    Raises:
        InvalidArgumentError: If ``user`` is ``None`` or is a dict that is not a
            valid user record.
    """
    if user is None:
        raise InvalidArgumentError("user must not be None")
    if isinstance(user, dict):
        try:
            user = GraphUser.model_validate(user)
        except ValidationError as e:
            raise InvalidArgumentError(f"Invalid Graph user record: {e}") from e
    try:
        precedence = EmailPrecedence(precedence)
    except ValueError as e:
        raise InvalidArgumentError(f"Unknown email precedence: {precedence!r}") from e

    if (
        precedence == EmailPrecedence.DIRECTORY_FIRST
        and _has_content(user.mail)
        and _has_content(user.given_name)
        and _has_content(user.surname)
    ):
        return ContactInfo(
            email=_clean(user.mail),
            first_name=_clean(user.given_name),
            last_name=_clean(user.surname),
        )

    email = _resolve_email(user, precedence)
    first, last = _resolve_names(user)
    return ContactInfo(email=_clean(email), first_name=_clean(first), last_name=_clean(last))
