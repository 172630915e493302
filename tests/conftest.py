import pytest
import requests

from toplangs.services.github import GitHubClient


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    """Sesión tipo requests: responde por URL y registra cada llamada."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.closed = False

    def get(self, url, headers=None, params=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "params": params, "timeout": timeout})
        resp = self.routes.get(url)
        if resp is None:
            return FakeResponse(404, {"message": "Not Found"}, "Not Found")
        if isinstance(resp, Exception):
            raise resp
        return resp

    def close(self):
        self.closed = True

    def urls(self):
        return [c["url"] for c in self.calls]


API = "https://api.github.com"


def repos_url(username):
    return f"{API}/users/{username}/repos"


def repo(name, fork=False, archived=False):
    return {
        "name": name,
        "fork": fork,
        "archived": archived,
        "languages_url": f"{API}/repos/octo/{name}/languages",
    }


@pytest.fixture
def make_client():
    def _make(routes, token=None):
        session = FakeSession(routes)
        return GitHubClient(token=token, api_url=API, timeout=5, session=session), session
    return _make


@pytest.fixture
def transport_error():
    return requests.ConnectionError("boom")
