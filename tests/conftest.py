import pytest
from fastapi.testclient import TestClient

from ticket_api.main import create_app
from ticket_api.tickets.models import TicketDraft
from ticket_api.tickets.store import TicketStore
from ticket_api.tickets.validation import TicketDescription, TicketTitle


@pytest.fixture
def make_draft():
    def factory(title: str = "Fix bug", description: str = "Fix the critical bug") -> TicketDraft:
        return TicketDraft(title=TicketTitle(title), description=TicketDescription(description))

    return factory


@pytest.fixture
def store() -> TicketStore:
    return TicketStore()


@pytest.fixture
def client():
    with TestClient(create_app()) as test_client:
        yield test_client
