"""
Pytest configuration and fixtures.
"""
from unittest.mock import patch

import pytest

from dwolla.client import DwollaClient
from dwolla.config import Config


@pytest.fixture
def oauth_token():
    return "valid_token"


@pytest.fixture
def client():
    return DwollaClient(Config(api_key="app_key", api_secret="app_secret"))


@pytest.fixture
def stub_get():
    """Patch requests.get; tests set ``return_value`` with fake_response(...)."""
    with patch("dwolla.client.requests.get") as mocked:
        yield mocked


@pytest.fixture
def stub_post():
    """Patch requests.post; tests set ``return_value`` with fake_response(...)."""
    with patch("dwolla.client.requests.post") as mocked:
        yield mocked
