"""Pytest configuration and shared fixtures."""

import pytest

from helpdesk.config import Role
from helpdesk.shared.domain import Actor
from tests.factories import NOW


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def admin():
    return Actor(id="admin-1", role=Role.ADMIN)


@pytest.fixture
def agent():
    return Actor(id="agent-7", role=Role.AGENT)


@pytest.fixture
def owner():
    return Actor(id="user-42", role=Role.USER)
