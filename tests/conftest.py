"""
Shared fixtures: a stand-in for the supabase client that records every
query-builder chain and replays queued replies, plus backend handles wired
to it.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from storefront.services.backend_client import BackendClient

BASE_URL = "http://backend.test"
ACCESS_TOKEN = "user-access-token"
USER = {"id": "user-1", "email": "cliente@example.com"}


class FakeModel(dict):
    """Plays the SDK's pydantic models (User, Session): only model_dump is used."""

    def model_dump(self, mode=None):
        return dict(self)


class FakeQuery:
    """One `client.table(name)` chain; every builder call is recorded."""

    def __init__(self, owner, table):
        self.owner = owner
        self.table = table
        self.steps = []

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)

        def step(*args, **kwargs):
            self.steps.append((name, args, kwargs))
            return self

        return step

    def execute(self):
        self.owner.executed.append(self)
        reply = self.owner.replies.pop(0) if self.owner.replies else []
        if isinstance(reply, Exception):
            raise reply
        return SimpleNamespace(data=reply)

    def names(self):
        return [name for name, _, _ in self.steps]

    def step(self, name):
        """(args, kwargs) of the first call named `name`."""
        for step_name, args, kwargs in self.steps:
            if step_name == name:
                return args, kwargs
        raise AssertionError(f"{name} not called on {self.table}")


class FakeSupabase:
    def __init__(self):
        self.queries = []
        self.executed = []
        self.replies = []
        self.auth = MagicMock()
        self.auth.get_user.return_value = None
        self.auth.get_session.return_value = None

    def table(self, name):
        query = FakeQuery(self, name)
        self.queries.append(query)
        return query

    def reply(self, *replies):
        self.replies.extend(replies)
        return self

    def tables(self):
        return [q.table for q in self.executed]


def user_response(user=None):
    return SimpleNamespace(user=FakeModel(user or USER))


@pytest.fixture
def supabase():
    return FakeSupabase()


@pytest.fixture
def backend(supabase):
    """Anonymous handle (no session, no token)."""
    return BackendClient(supabase, BASE_URL)


@pytest.fixture
def authed_backend(supabase):
    """Handle carrying a caller token; the SDK resolves it to USER."""
    supabase.auth.get_user.return_value = user_response()
    return BackendClient(supabase, BASE_URL, access_token=ACCESS_TOKEN)
