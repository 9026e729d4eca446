from fastapi import APIRouter

from graphcontact.config import get_settings
from graphcontact.models.contacts import ContactInfo, EmailPrecedence
from graphcontact.models.graph import GraphUser
from graphcontact.services import contacts as contacts_service

router = APIRouter(prefix="/api/contacts", tags=["contacts"])


@router.post("/extract")
def extract_contact_info(user: GraphUser, precedence: EmailPrecedence | None = None) -> ContactInfo:
    if precedence is None:
        precedence = get_settings().email_precedence
    return contacts_service.extract_contact_info(user, precedence)
