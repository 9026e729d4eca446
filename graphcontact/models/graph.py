"""Subset of the Microsoft Graph ``user`` resource read by the contact extractor."""

from pydantic import BaseModel, ConfigDict, Field

EMAIL_ADDRESS_SIGN_IN = "emailAddress"
FEDERATED_SIGN_IN = "federated"


class SignInIdentity(BaseModel):
    """One entry of ``user.identities`` (Graph ``objectIdentity``)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    sign_in_type: str | None = Field(None, alias="signInType")
    issuer: str | None = None
    issuer_assigned_id: str | None = Field(None, alias="issuerAssignedId")


class GraphUser(BaseModel):
    """Graph user record as returned by ``/users/{id}?$select=...``.

    Callers must request every field below from Graph; anything not selected
    simply arrives as ``None``. Other Graph properties are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    mail: str | None = None
    user_principal_name: str | None = Field(None, alias="userPrincipalName")
    other_mails: list[str | None] | None = Field(None, alias="otherMails")
    identities: list[SignInIdentity] | None = None
    given_name: str | None = Field(None, alias="givenName")
    surname: str | None = None
    display_name: str | None = Field(None, alias="displayName")
