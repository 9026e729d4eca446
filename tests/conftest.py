import pytest
from fastapi.testclient import TestClient

from graphcontact.config import get_settings


# --- Canned Graph user records ---

GRAPH_MEMBER_USER = {
    "id": "87d349ed-44d7-43e1-9a83-5f2406dee5bd",
    "displayName": "Adele Vance",
    "givenName": "Adele",
    "surname": "Vance",
    "mail": "AdeleV@contoso.com",
    "userPrincipalName": "AdeleV@contoso.com",
    "otherMails": [],
    "jobTitle": "Retail Manager",
}

GRAPH_B2C_USER = {
    "id": "5b1d8e2a-1a9b-4bd2-9bf0-6f6b6a0e1c77",
    "displayName": "Jane Q Public",
    "givenName": None,
    "surname": None,
    "mail": None,
    "userPrincipalName": "5b1d8e2a@contosob2c.onmicrosoft.com",
    "identities": [
        {
            "signInType": "federated",
            "issuer": "google.com",
            "issuerAssignedId": "jane@social.example",
        },
        {
            "signInType": "emailAddress",
            "issuer": "contosob2c.onmicrosoft.com",
            "issuerAssignedId": "jane.public@contoso.com",
        },
        {
            "signInType": "userPrincipalName",
            "issuer": "contosob2c.onmicrosoft.com",
            "issuerAssignedId": "5b1d8e2a@contosob2c.onmicrosoft.com",
        },
    ],
}


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def api_client():
    """FastAPI TestClient for router tests."""
    from graphcontact.main import api
    return TestClient(api)
