#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Pytest configuration and fixtures for pachca-tags tests.
"""

from json import dumps

import pytest

from pachca_tags.client import PachcaClient
from pachca_tags.config import ClientConfig

TEST_API_URL = "https://pachca.test/api/shared/v1"
TEST_TOKEN = "test-admin-token"

MARKERS = {
    "unit": "Unit tests that don't require external dependencies",
    "integration": "Integration tests that require Pachca API access",
    "cli": "Tests that exercise the CLI interface",
    "dry_run": "Tests that verify dry-run functionality",
}


def pytest_configure(config):
    """Configure pytest with custom markers."""
    for marker, description in MARKERS.items():
        config.addinivalue_line("markers", f"{marker}: {description}")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test names and locations."""
    for item in items:
        if "test_main_cli" in item.nodeid:
            item.add_marker(pytest.mark.cli)
        if "dry_run" in item.name.lower():
            item.add_marker(pytest.mark.dry_run)
        if "test_integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)


class FakeResponse:
    """Just enough of requests.Response for PachcaClient."""

    def __init__(self, status_code, text):
        self.status_code = status_code
        self.text = text


class FakeSession:
    """In-memory stand-in for requests.Session routing on (method, path).

    A route is either a fixed (status, payload) pair or a callable taking
    (params, json_body) and returning one. Dict and list payloads are
    serialized to JSON; strings are sent as-is.
    """

    def __init__(self):
        self.headers = {}
        self.routes = {}
        self.calls = []

    def add(self, method, path, status=200, payload=None, handler=None):
        self.routes[(method, path)] = handler or (lambda params, body: (status, payload))

    def request(self, method, url, params=None, json=None):
        assert url.startswith(TEST_API_URL), url
        path = url[len(TEST_API_URL):]
        self.calls.append((method, path, params, json))

        route = self.routes.get((method, path))
        if route is None:
            return FakeResponse(404, '{"errors":[{"key":"not_found"}]}')
        status, payload = route(params, json)
        if isinstance(payload, (dict, list)):
            payload = dumps(payload)
        return FakeResponse(status, payload or "")

    def calls_to(self, method, path=None):
        return [c for c in self.calls if c[0] == method and (path is None or c[1] == path)]


def paged_users(users):
    """Route handler serving `users` through page/per query parameters."""
    def handler(params, body):
        page, per = int(params["page"]), int(params["per"])
        start = (page - 1) * per
        return 200, {"data": users[start:start + per]}
    return handler


def make_user(user_id, email, list_tags=None, **fields):
    user = {
        "id": user_id,
        "email": email,
        "first_name": fields.get("first_name", f"First{user_id}"),
        "last_name": fields.get("last_name", f"Last{user_id}"),
        "nickname": fields.get("nickname", f"user{user_id}"),
        "department": fields.get("department", "Engineering"),
        "phone_number": fields.get("phone_number", ""),
        "title": fields.get("title", "Developer"),
        "list_tags": list_tags if list_tags is not None else [],
    }
    if "group_tags" in fields:
        user["group_tags"] = fields["group_tags"]
    return user


@pytest.fixture
def fake_session():
    """A FakeSession with no routes."""
    return FakeSession()


@pytest.fixture
def client(fake_session):
    """A PachcaClient wired to fake_session."""
    config = ClientConfig(api_url=TEST_API_URL, admin_token=TEST_TOKEN)
    return PachcaClient(config, session=fake_session)


@pytest.fixture
def workspace(fake_session):
    """A small fake workspace with tags and users routed on fake_session.

    Tracks created tags and user updates so tests can inspect final state.
    """
    state = {
        "tags": [{"id": 1, "name": "qa"}, {"id": 2, "name": "design"}],
        "users": [
            make_user(10, "a@x.com", ["qa"]),
            make_user(11, "Bob@X.com", []),
            make_user(12, "carol@x.com", ["design", "qa"]),
        ],
        "next_tag_id": 42,
    }

    def list_tags(params, body):
        return 200, {"data": state["tags"]}

    def create_tag(params, body):
        name = body["group_tag"]["name"]
        if any(tag["name"] == name for tag in state["tags"]):
            return 422, {"errors": [{"key": "name", "value": "has already been taken"}]}
        tag = {"id": state["next_tag_id"], "name": name}
        state["next_tag_id"] += 1
        state["tags"].append(tag)
        return 201, {"data": tag}

    fake_session.add("GET", "/group_tags", handler=list_tags)
    fake_session.add("POST", "/group_tags", handler=create_tag)
    fake_session.add("GET", "/users", handler=paged_users(state["users"]))

    for user in state["users"]:
        def get_user(params, body, user=user):
            return 200, {"data": user}

        def put_user(params, body, user=user):
            user["list_tags"] = list(body["user"]["list_tags"])
            return 200, {"data": user}

        fake_session.add("GET", f"/users/{user['id']}", handler=get_user)
        fake_session.add("PUT", f"/users/{user['id']}", handler=put_user)

    return state


@pytest.fixture
def user_factory():
    """Build user records shaped like GET /users items."""
    return make_user


@pytest.fixture
def paged_users_route():
    """Build a GET /users handler paginating a list of user records."""
    return paged_users
