import pytest
from pydantic import ValidationError
from app.core.config import Settings

from assistant.decision_engine import ScoringConfig


def test_settings_with_defaults():
    """Test settings with default values."""
    settings = Settings()

    assert settings.ENVIRONMENT == "development"
    assert settings.API_V1_STR == "/api/v1"
    assert settings.PROJECT_NAME == "UniSync Assistant"
    assert settings.PORT == 8000
    assert settings.DIRECTORY_BACKEND == "static"
    assert settings.CONVERSATION_SESSION_TTL > 0


def test_default_thresholds():
    """Test the canonical scoring thresholds."""
    settings = Settings()

    assert settings.INTENT_CONFIDENCE_THRESHOLD == 0.12
    assert settings.FUZZY_MATCH_THRESHOLD == 0.55
    assert settings.WORD_SIMILARITY_THRESHOLD == 0.7
    assert settings.WORD_OVERLAP_THRESHOLD == 0.6
    assert settings.FORWARD_CONTAINMENT_MULTIPLIER == 1.5
    assert settings.REVERSE_CONTAINMENT_WEIGHT == 0.6
    assert settings.FUZZY_MATCH_WEIGHT == 0.7
    assert settings.WORD_OVERLAP_WEIGHT == 0.8


def test_threshold_out_of_range():
    """Thresholds outside [0, 1] are rejected."""
    with pytest.raises(ValidationError):
        Settings(FUZZY_MATCH_THRESHOLD=1.5)

    with pytest.raises(ValidationError):
        Settings(INTENT_CONFIDENCE_THRESHOLD=-0.1)


def test_forward_multiplier_must_be_positive():
    """A zero multiplier would disable forward containment silently."""
    with pytest.raises(ValidationError):
        Settings(FORWARD_CONTAINMENT_MULTIPLIER=0)


def test_directory_backend_validation():
    """Test directory backend validation."""
    assert Settings(DIRECTORY_BACKEND="HTTP").DIRECTORY_BACKEND == "http"

    with pytest.raises(ValidationError):
        Settings(DIRECTORY_BACKEND="ldap")


def test_session_limits_must_be_positive():
    """Test session TTL and capacity validation."""
    with pytest.raises(ValidationError):
        Settings(CONVERSATION_SESSION_TTL=0)

    with pytest.raises(ValidationError):
        Settings(MAX_ACTIVE_SESSIONS=-1)


def test_scoring_config_from_settings():
    """Scoring constants follow the settings they are built from."""
    config = ScoringConfig.from_settings(Settings(FUZZY_MATCH_THRESHOLD=0.6, INTENT_CONFIDENCE_THRESHOLD=0.3))

    assert config.fuzzy_threshold == 0.6
    assert config.unknown_threshold == 0.3
    assert config.forward_multiplier == 1.5
