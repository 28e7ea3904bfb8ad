"""Tests for the HTTP client and envelope handling."""
from unittest.mock import MagicMock

import pytest
import requests

from dwolla import Config, DwollaClient, RequestException
from tests.helpers import fake_response, fixture, requested_query


def test_returns_the_response_payload(stub_get):
    stub_get.return_value = fake_response(fixture("balance.json"))

    assert DwollaClient().get("/balance", oauth_token="token") == 55.76


def test_maps_failed_envelopes_to_request_exception(stub_get):
    body = fixture("error.json")
    stub_get.return_value = fake_response(body)

    with pytest.raises(RequestException) as error:
        DwollaClient().get("/users", oauth_token="token")

    assert str(error.value) == "Token does not have access to requested resource."
    assert error.value.response == body


def test_omits_unset_parameters_and_puts_the_token_last(stub_get):
    stub_get.return_value = fake_response(fixture("contacts.json"))

    DwollaClient().get("/contacts", oauth_token="token", params=[("search", None), ("limit", 5)])

    assert requested_query(stub_get) == [("limit", 5), ("oauth_token", "token")]


def test_passes_the_configured_timeout(stub_post):
    stub_post.return_value = fake_response(fixture("send.json"))

    DwollaClient(Config(timeout=5)).post("/transactions/send", {"pin": "2222"}, oauth_token="token")

    assert stub_post.call_args.kwargs["timeout"] == 5


def test_transport_errors_are_not_wrapped(stub_get):
    stub_get.side_effect = requests.exceptions.Timeout("timed out")

    with pytest.raises(requests.exceptions.Timeout):
        DwollaClient().get("/balance", oauth_token="token")


def test_malformed_bodies_are_not_wrapped(stub_get):
    response = MagicMock()
    response.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)
    stub_get.return_value = response

    with pytest.raises(requests.exceptions.RequestException) as error:
        DwollaClient().get("/balance", oauth_token="token")

    assert not isinstance(error.value, RequestException)


def test_non_envelope_bodies_check_the_http_status(stub_get):
    response = fake_response({"error": "not found"})
    response.raise_for_status.side_effect = requests.exceptions.HTTPError("404")
    stub_get.return_value = response

    with pytest.raises(requests.exceptions.HTTPError):
        DwollaClient().get("/missing", oauth_token="token")


def test_non_envelope_bodies_with_an_ok_status_are_rejected(stub_get):
    body = {"error": "gateway"}
    stub_get.return_value = fake_response(body)

    with pytest.raises(RequestException, match="missing Success flag") as error:
        DwollaClient().get("/balance", oauth_token="token")

    assert error.value.response == body


@pytest.mark.parametrize("body", [["not", "an", "envelope"], "plain text"])
def test_non_object_bodies_are_rejected(stub_get, body):
    stub_get.return_value = fake_response(body)

    with pytest.raises(RequestException):
        DwollaClient().get("/users", oauth_token="token")


def test_config_reads_connection_settings_from_the_environment(monkeypatch):
    monkeypatch.setenv("DWOLLA_BASE_URL", "https://sandbox.example.com/rest/")
    monkeypatch.setenv("DWOLLA_TIMEOUT", "7.5")

    config = Config()

    assert config.base_url == "https://sandbox.example.com/rest"
    assert config.timeout == 7.5


def test_config_keeps_the_secret_out_of_its_repr():
    assert "app_secret" not in repr(Config(api_key="app_key", api_secret="app_secret"))


def test_config_reads_application_credentials_from_the_environment(monkeypatch):
    monkeypatch.setenv("DWOLLA_API_KEY", "env_key")
    monkeypatch.setenv("DWOLLA_API_SECRET", "env_secret")

    config = Config()

    assert config.api_key == "env_key"
    assert config.has_application_credentials


def test_client_defaults_to_the_shared_settings():
    from dwolla.config import settings

    assert DwollaClient().config is settings
