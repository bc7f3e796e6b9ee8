"""Tests for the in-memory session store."""

from app.core.security import InMemorySessionStore


def test_issue_and_resolve():
    store = InMemorySessionStore()

    token = store.issue("admin", {"username": "quanadmin"})
    session = store.resolve(token)

    assert session.user_type == "admin"
    assert session.user_data == {"username": "quanadmin"}
    assert len(store) == 1


def test_tokens_are_unique():
    store = InMemorySessionStore()

    tokens = {store.issue("employee", {"username": "jane"}) for _ in range(20)}

    assert len(tokens) == 20


def test_resolve_unknown_or_missing_token():
    store = InMemorySessionStore()

    assert store.resolve("not-a-token") is None
    assert store.resolve(None) is None
    assert store.resolve("") is None


def test_revoke():
    store = InMemorySessionStore()
    token = store.issue("employee", {"username": "jane"})
    other = store.issue("employee", {"username": "joe"})

    store.revoke(token)
    store.revoke(None)
    store.revoke("unknown")

    assert store.resolve(token) is None
    assert store.resolve(other) is not None


def test_session_data_is_copied():
    store = InMemorySessionStore()
    user_data = {"username": "jane"}
    token = store.issue("employee", user_data)

    user_data["username"] = "mallory"

    assert store.resolve(token).user_data["username"] == "jane"
