"""Shared fixtures for BookStack client tests."""

import json
from unittest.mock import MagicMock

import pytest

from bookstack_api.client import BookStackClient
from bookstack_api.options import set_token, set_url


def make_response(status_code=200, body=b"{}"):
    """Build a mocked requests.Response."""
    if not isinstance(body, (bytes, str)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode()
    response = MagicMock()
    response.status_code = status_code
    response.content = body
    return response


@pytest.fixture
def respond():
    """Factory fixture for mocked responses."""
    return make_response


@pytest.fixture
def mock_client():
    """Create a BookStack client with a mocked session."""
    mock_session = MagicMock()
    mock_session.request.return_value = make_response()

    client = BookStackClient(
        set_url("https://test.bookstack.local"),
        set_token("test_token_id", "test_token_secret"),
    )
    client._session = mock_session

    return client


@pytest.fixture
def sample_book():
    """Sample book from the listing endpoint."""
    return {
        "id": 1,
        "name": "Test Book",
        "slug": "test-book",
        "description": "Test description",
        "created_at": "2024-01-01T00:00:00.000000Z",
        "updated_at": "2024-01-01T00:00:00.000000Z",
        "created_by": 1,
        "updated_by": 1,
        "owned_by": 1,
        "default_template_id": None,
    }


@pytest.fixture
def sample_book_detailed():
    """Sample book from the read endpoint."""
    return {
        "id": 1,
        "name": "Test Book",
        "slug": "test-book",
        "description": "Test description",
        "description_html": "<p>Test description</p>",
        "created_at": "2024-01-01T00:00:00.000000Z",
        "updated_at": "2024-01-01T00:00:00.000000Z",
        "created_by": {"id": 1, "name": "Admin", "slug": "admin"},
        "updated_by": {"id": 1, "name": "Admin", "slug": "admin"},
        "owned_by": {"id": 1, "name": "Admin", "slug": "admin"},
        "default_template_id": None,
        "contents": [
            {
                "id": 50,
                "name": "Chapter One",
                "slug": "chapter-one",
                "type": "chapter",
                "book_id": 1,
                "priority": 1,
                "pages": [
                    {"id": 51, "name": "Intro", "slug": "intro", "type": "page", "book_id": 1, "priority": 0},
                ],
            },
            {"id": 60, "name": "Loose Page", "slug": "loose-page", "type": "page", "book_id": 1, "priority": 2},
        ],
        "tags": [{"name": "Category", "value": "Guide", "order": 0}],
        "cover": None,
    }


@pytest.fixture
def sample_user():
    """Sample user data."""
    return {
        "id": 1,
        "name": "Admin",
        "slug": "admin",
        "email": "admin@example.com",
        "created_at": "2024-01-01T00:00:00.000000Z",
        "updated_at": "2024-01-01T00:00:00.000000Z",
        "external_auth_id": "",
        "last_activity_at": "2024-02-01T00:00:00.000000Z",
        "profile_url": "https://test.bookstack.local/user/admin",
        "edit_url": "https://test.bookstack.local/settings/users/1",
        "avatar_url": None,
        "roles": [{"id": 1, "display_name": "Admin"}],
    }
