# tests/conftest.py

import os
import sys

# Add the project root (the folder containing `app/`) to sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest

from app.services.live_registry import LiveDeliveryRegistry
from app.services.conversation import ConversationService
from app.services.mentorship import MentorshipService
from app.services.project import ProjectService
from app.services.relationship_gate import RelationshipGate
from fakes import FakeDirectory, FakeMentorshipStore, FakeMessageStore, FakeProjectStore


@pytest.fixture
def registry():
    return LiveDeliveryRegistry(heartbeat_interval=30)


@pytest.fixture
def message_store():
    return FakeMessageStore()


@pytest.fixture
def mentorship_store():
    return FakeMentorshipStore()


@pytest.fixture
def directory():
    return FakeDirectory.seeded()


@pytest.fixture
def conversation_service(message_store, mentorship_store, registry, directory):
    return ConversationService(
        messages=message_store,
        gate=RelationshipGate(mentorship_store),
        registry=registry,
        mentorships=mentorship_store,
        directory=directory,
    )


@pytest.fixture
def mentorship_service(mentorship_store, directory, project_store):
    return MentorshipService(mentorship_store, directory, project_store)


@pytest.fixture
def project_store():
    return FakeProjectStore()


@pytest.fixture
def project_service(project_store):
    return ProjectService(project_store)
