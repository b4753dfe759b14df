import random

import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from app.main import app
from app.api.v1.assistant import get_directory, get_state_manager
from assistant.conversation import AssistantPipeline, ConversationStateManager
from assistant.decision_engine import IntentClassifier, ScoringConfig
from assistant.directory import StaticCampusDirectory


@pytest.fixture
def static_directory():
    """Directory backed by the bundled demo roster."""
    return StaticCampusDirectory()


@pytest.fixture
def failing_directory():
    """Directory whose every lookup raises."""
    directory = AsyncMock()
    directory.lookup_officer.side_effect = RuntimeError("directory offline")
    directory.lookup_all_officers.side_effect = RuntimeError("directory offline")
    directory.lookup_committee.side_effect = RuntimeError("directory offline")
    directory.lookup_room_statistics.side_effect = RuntimeError("directory offline")
    return directory


@pytest.fixture
def mock_directory():
    """Directory whose lookups all miss unless a test sets a return value."""
    directory = AsyncMock()
    directory.lookup_officer.return_value = None
    directory.lookup_all_officers.return_value = None
    directory.lookup_committee.return_value = None
    directory.lookup_room_statistics.return_value = None
    return directory


@pytest.fixture
def classifier():
    """Classifier with the default scoring constants."""
    return IntentClassifier(config=ScoringConfig())


@pytest.fixture
def pipeline(static_directory, classifier):
    """Pipeline with a seeded response random source."""
    return AssistantPipeline(static_directory, classifier=classifier, rng=random.Random(42))


@pytest.fixture
def state_manager():
    """Fresh in-memory session registry."""
    return ConversationStateManager(session_ttl=3600, max_sessions=10)


@pytest.fixture
def client(static_directory, state_manager):
    """Create test client."""
    app.dependency_overrides[get_directory] = lambda: static_directory
    app.dependency_overrides[get_state_manager] = lambda: state_manager

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
