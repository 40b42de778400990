# pomoauth/client.py

import requests


# Base URL of the auth backend
DEFAULT_URL = "http://localhost:8000"


class AuthClient:
    """
    Thin client for the auth endpoints.

    The session cookie is HTTP-only, so it lives in the underlying
    session's cookie jar and is sent back automatically.
    """

    def __init__(self, base_url=DEFAULT_URL, session=None):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def _url(self, path):
        return f"{self.base_url}{path}"

    @staticmethod
    def _result(response):
        try:
            data = response.json()
        except ValueError:
            return {"error": f"Unexpected response: {response.status_code}"}
        if response.status_code == 200:
            return data
        if isinstance(data, dict) and data.get("error"):
            return {"error": data["error"]}
        return {"error": f"Status {response.status_code}"}

    # -------------------------------
    # Authentication-related functions
    # -------------------------------

    def signup(self, email, password, username):
        """
        Registers a new account. Does not sign in.
        """
        res = self.session.post(
            self._url("/signup"),
            json={"email": email, "password": password, "username": username},
        )
        return self._result(res)

    def login(self, email, password):
        """
        Signs in; on success the session cookie is stored by the session.
        """
        res = self.session.post(
            self._url("/login"),
            json={"email": email, "password": password},
        )
        return self._result(res)

    def logout(self):
        res = self.session.post(self._url("/logout"))
        return self._result(res)

    def whoami(self):
        """
        Returns the signed-in user, or None when the session is not valid.
        """
        res = self.session.get(self._url("/validate"))
        if res.status_code == 401:
            return None
        data = self._result(res)
        return data.get("message") if "error" not in data else None
