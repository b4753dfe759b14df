from typing import Optional
from pydantic import validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "UniSync Assistant"
    VERSION: str = "1.0.0"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    # Intent Classification
    INTENT_CONFIDENCE_THRESHOLD: float = 0.12
    FUZZY_MATCH_THRESHOLD: float = 0.55
    WORD_SIMILARITY_THRESHOLD: float = 0.7
    WORD_OVERLAP_THRESHOLD: float = 0.6

    # Signal weights
    FORWARD_CONTAINMENT_MULTIPLIER: float = 1.5
    REVERSE_CONTAINMENT_WEIGHT: float = 0.6
    FUZZY_MATCH_WEIGHT: float = 0.7
    WORD_OVERLAP_WEIGHT: float = 0.8

    # Response selection
    RESPONSE_RANDOM_SEED: Optional[int] = None

    # Campus Directory
    DIRECTORY_BACKEND: str = "static"  # static, http
    DIRECTORY_DATA_PATH: Optional[str] = None  # Bundled roster if None
    DIRECTORY_API_URL: str = "http://localhost:5000/api"
    DIRECTORY_API_TOKEN: Optional[str] = None
    DIRECTORY_TIMEOUT: int = 10

    # Conversation Management
    CONVERSATION_SESSION_TTL: int = 3600  # 1 hour
    MAX_ACTIVE_SESSIONS: int = 1000

    @validator(
        "INTENT_CONFIDENCE_THRESHOLD",
        "FUZZY_MATCH_THRESHOLD",
        "WORD_SIMILARITY_THRESHOLD",
        "WORD_OVERLAP_THRESHOLD",
        "REVERSE_CONTAINMENT_WEIGHT",
        "FUZZY_MATCH_WEIGHT",
        "WORD_OVERLAP_WEIGHT",
    )
    def validate_unit_interval(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("must be between 0 and 1")
        return v

    @validator("FORWARD_CONTAINMENT_MULTIPLIER")
    def validate_multiplier(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("must be positive")
        return v

    @validator("DIRECTORY_BACKEND")
    def validate_directory_backend(cls, v: str) -> str:
        v = v.lower()
        if v not in ("static", "http"):
            raise ValueError("DIRECTORY_BACKEND must be 'static' or 'http'")
        return v

    @validator("CONVERSATION_SESSION_TTL", "MAX_ACTIVE_SESSIONS", "DIRECTORY_TIMEOUT")
    def validate_positive_int(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be positive")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
