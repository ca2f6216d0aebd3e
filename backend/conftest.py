import pytest
from rest_framework.test import APIClient

from users.tests.factories import UserFactory
from users.tokens import issue_access_token


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def client_for():
    """Build an APIClient that sends a bearer token for ``user``."""
    def _client(user):
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {issue_access_token(user)}")
        return client
    return _client


@pytest.fixture
def member(db):
    return UserFactory()


@pytest.fixture
def other_member(db):
    return UserFactory()
