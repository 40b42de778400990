import pytest

from pomoauth.client import AuthClient

from conftest import ALICE


@pytest.fixture()
def api(client):
    return AuthClient(base_url="http://testserver", session=client)


def test_full_session_flow(api):
    assert api.signup(**ALICE) == {"success": "user created"}
    assert api.whoami() is None

    assert api.login(ALICE["email"], ALICE["password"]) == {"success": "login successful"}
    me = api.whoami()
    assert me["email"] == ALICE["email"]
    assert me["username"] == ALICE["username"]

    assert api.logout() == {"message": "Logged out successfully"}
    assert api.whoami() is None


def test_errors_are_passed_through(api):
    api.signup(**ALICE)

    assert api.signup(**ALICE) == {"error": "Failed to create user"}
    assert api.login(ALICE["email"], "wrong") == {"error": "Invalid email or password"}
    assert api.login("ghost@x.com", "wrong") == {"error": "Invalid email or password"}


def test_base_url_trailing_slash(client):
    api = AuthClient(base_url="http://testserver/", session=client)

    assert api._url("/login") == "http://testserver/login"


def test_default_session_is_requests():
    import requests

    api = AuthClient()

    assert isinstance(api.session, requests.Session)
    assert api.base_url == "http://localhost:8000"
