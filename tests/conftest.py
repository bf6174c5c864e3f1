import re

import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.throttle import reset_rate_limits
from data.contact_store import ContactStoreError, ContactSubmission
from data.submissions import SubmissionTracker
from services.contact_form import ContactFormFlow, get_contact_form


class FakeStore:
    """In-memory stand-in for the Supabase table."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls = 0
        self.records: list[dict] = []

    def insert(self, submission: ContactSubmission) -> None:
        self.calls += 1
        if self.fail:
            raise ContactStoreError("insert failed")
        self.records.append(submission.to_record())


def make_submission(**overrides) -> ContactSubmission:
    fields = {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "company_name": "Analytical Engines",
        "position": "Manager",
        "message": "Do you ship to Wyoming?",
    }
    fields.update(overrides)
    return ContactSubmission(**fields)


def form_id_from(html: str) -> str:
    match = re.search(r'name="form_id" value="([0-9a-f]{32})"', html)
    assert match, "page has no form id"
    return match.group(1)


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def tracker():
    return SubmissionTracker(ttl_seconds=3600)


@pytest.fixture
def flow(store, tracker):
    return ContactFormFlow(store, tracker)


@pytest.fixture
def client(flow):
    reset_rate_limits()
    app.dependency_overrides[get_contact_form] = lambda: flow
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    reset_rate_limits()
