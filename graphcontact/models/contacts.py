from enum import Enum

from pydantic import BaseModel


class EmailPrecedence(str, Enum):
    """Order in which email sources are consulted.

    ``directory_first`` trusts ``mail``, ``userPrincipalName`` and ``otherMails``
    before sign-in identities. ``identity_first`` scans identities first and
    never reads ``otherMails``.
    """

    DIRECTORY_FIRST = "directory_first"
    IDENTITY_FIRST = "identity_first"


class ContactInfo(BaseModel):
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    model_config = {"frozen": True}

    def as_tuple(self) -> tuple[str | None, str | None, str | None]:
        return self.email, self.first_name, self.last_name
