"""Root conftest — shared test configuration and fakes.

Invariants:
    - Environment is fixed before any app module is imported (core.config
      reads it once at import time)
    - No test touches the network: the HTTP layer is a scripted fake session
    - No test touches the real profile directory: persistence is disabled
      unless a test builds its own store under tmp_path
"""

import json
import os

import pytest
import requests

os.environ.setdefault("BOARD_API_URL", "http://board.test/api")
os.environ.setdefault("BOARD_PROFILE_DIR", "none")
os.environ.setdefault("BOARD_LOG_LEVEL", "DEBUG")

from core.errors import RemoteResult  # noqa: E402
from core.identity_store import MemoryIdentityStore  # noqa: E402
from core.session import IdentitySessionManager  # noqa: E402
from services.board_api import BoardClient  # noqa: E402

API_URL = "http://board.test/api"


class FakeResponse:
    """Just enough of `requests.Response` for BoardClient."""

    def __init__(self, body, status_code=200):
        self.text = body if isinstance(body, str) else json.dumps(body)
        self.status_code = status_code

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        return json.loads(self.text)


class FakeHTTPSession:
    """Scripted stand-in for `requests.Session`.

    Each call pops the next scripted reply; an exception instance is raised
    instead of returned.
    """

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def request(self, method, url, params=None, json=None, timeout=None):
        self.calls.append(
            {"method": method, "url": url, "params": params, "json": json, "timeout": timeout}
        )
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class FakeBoardClient:
    """Controller-level fake of BoardClient.

    `results` maps an operation name to a list of RemoteResults returned in
    order (the last one repeats). `hooks` maps an operation name to a
    callable run before the result is returned, to simulate things that
    happen while a request is in flight.
    """

    def __init__(self, configured=True, **results):
        self.configured = configured
        self.results = {name: list(items) for name, items in results.items()}
        self.calls = []
        self.hooks = {}

    def _reply(self, name, *args):
        self.calls.append((name, args))
        hook = self.hooks.pop(name, None)
        if hook is not None:
            hook()
        queue = self.results[name]
        return queue.pop(0) if len(queue) > 1 else queue[0]

    def calls_to(self, name):
        return [args for op, args in self.calls if op == name]

    def register(self, email, password):
        return self._reply("register", email, password)

    def login(self, email, password):
        return self._reply("login", email, password)

    def list_threads(self):
        return self._reply("list_threads")

    def create_thread(self, identity, title):
        return self._reply("create_thread", identity, title)

    def list_thread_posts(self, thread_id):
        return self._reply("list_thread_posts", thread_id)

    def create_post(self, identity, thread_id, content):
        return self._reply("create_post", identity, thread_id, content)

    def lookup_identity_details(self, identity):
        return self._reply("lookup_identity_details", identity)


@pytest.fixture
def http():
    """Factory: http(*replies) → (BoardClient, FakeHTTPSession)."""

    def make(*replies):
        fake = FakeHTTPSession(*replies)
        return BoardClient(API_URL, timeout=5.0, session=fake), fake

    return make


@pytest.fixture
def http_session():
    return FakeHTTPSession


@pytest.fixture
def fake_client():
    return FakeBoardClient


@pytest.fixture
def response():
    return FakeResponse


@pytest.fixture
def ok():
    return RemoteResult.success


@pytest.fixture
def signed_in():
    """A resolved session whose store already holds identity "U1"."""
    return IdentitySessionManager.start(MemoryIdentityStore("U1"))


@pytest.fixture
def signed_out():
    return IdentitySessionManager.start(MemoryIdentityStore())


@pytest.fixture
def navigator():
    """Records navigation targets instead of switching views."""

    class Recorder(list):
        def __call__(self, view, **params):
            self.append(view)

    return Recorder()


@pytest.fixture
def transport_error():
    return requests.ConnectionError("connection refused")
