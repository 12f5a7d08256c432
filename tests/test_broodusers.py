from unittest import mock

import pytest
import requests

from jotter.broodusers import (
    BroodAuthenticator,
    BugoutAuthHTTPError,
    BugoutAuthUnexpectedResponse,
)
from jotter.utils.settings import BugoutAuthConfigurationError


def brood_response(body=None, status_code=200):
    response = mock.Mock()
    response.status_code = status_code
    response.json.return_value = body
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def authenticator():
    return BroodAuthenticator(auth_url="https://auth.example.com/", timeout=3)


def test_resolve_verified_user(authenticator):
    with mock.patch("jotter.broodusers.requests.get") as get:
        get.return_value = brood_response({"user_id": "A", "verified": True})
        assert authenticator.resolve("token") == "A"

    get.assert_called_once_with(
        "https://auth.example.com/auth",
        headers={"Authorization": "Bearer token"},
        timeout=3,
    )


def test_resolve_unverified_user(authenticator):
    with mock.patch("jotter.broodusers.requests.get") as get:
        get.return_value = brood_response({"user_id": "A", "verified": False})
        assert authenticator.resolve("token") is None


def test_resolve_without_token(authenticator):
    with mock.patch("jotter.broodusers.requests.get") as get:
        assert authenticator.resolve(None) is None
        assert authenticator.resolve("") is None
    get.assert_not_called()


@pytest.mark.parametrize("status_code", [401, 403, 404])
def test_resolve_rejected_token(authenticator, status_code):
    with mock.patch("jotter.broodusers.requests.get") as get:
        get.return_value = brood_response({"detail": "nope"}, status_code=status_code)
        assert authenticator.resolve("token") is None


def test_resolve_brood_failure(authenticator):
    with mock.patch("jotter.broodusers.requests.get") as get:
        get.return_value = brood_response(status_code=502)
        with pytest.raises(BugoutAuthHTTPError):
            authenticator.resolve("token")


def test_resolve_unexpected_response(authenticator):
    with mock.patch("jotter.broodusers.requests.get") as get:
        get.return_value = brood_response({"verified": True})
        with pytest.raises(BugoutAuthUnexpectedResponse):
            authenticator.resolve("token")


def test_resolve_unparseable_response(authenticator):
    with mock.patch("jotter.broodusers.requests.get") as get:
        response = brood_response()
        response.json.side_effect = ValueError("Expecting value")
        get.return_value = response
        with pytest.raises(BugoutAuthUnexpectedResponse):
            authenticator.resolve("token")


def test_resolve_without_auth_url(monkeypatch):
    monkeypatch.delenv("BUGOUT_AUTH_URL", raising=False)
    authenticator = BroodAuthenticator()
    with pytest.raises(BugoutAuthConfigurationError):
        authenticator.resolve("token")


def test_auth_url_from_environment(monkeypatch):
    monkeypatch.setenv("BUGOUT_AUTH_URL", "https://brood.example.com/")
    authenticator = BroodAuthenticator()
    with mock.patch("jotter.broodusers.requests.get") as get:
        get.return_value = brood_response({"user_id": "B", "verified": True})
        assert authenticator.resolve("token") == "B"
    assert get.call_args[0][0] == "https://brood.example.com/auth"
