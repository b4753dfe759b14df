"""
Assistant API endpoints: sessions, messages and classification diagnostics.
"""

from typing import Dict, List, Optional, Any
from datetime import datetime

from fastapi import APIRouter, HTTPException, status, Depends
from pydantic import BaseModel, Field, validator

from assistant.conversation import (
    AssistantPipeline,
    ConversationStateManager,
    conversation_state_manager,
)
from assistant.decision_engine import entity_extractor, intent_classifier, sentiment
from assistant.directory import CampusDirectory, build_directory
from assistant.lexicon import DYNAMIC_INTENTS, INTENT_DESCRIPTIONS, IntentName
from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)
router = APIRouter()


# Request/Response Models
class MessageRequest(BaseModel):
    """Request model for sending a message to the assistant."""
    message: str = Field(..., description="User message", min_length=1, max_length=1000)
    session_id: Optional[str] = Field(None, description="Session to continue; a new one is created if omitted")

    @validator('message')
    def validate_message(cls, v):
        if not v.strip():
            raise ValueError('Message must not be blank')
        return v


class ClassifyRequest(BaseModel):
    """Request model for classification diagnostics."""
    message: str = Field(..., description="Text to classify", min_length=1, max_length=1000)


class ContextModel(BaseModel):
    last_intent: Optional[str] = None
    entities: Dict[str, List[str]] = Field(default_factory=dict)
    turn_count: int = 0


class SessionResponse(BaseModel):
    session_id: str
    context: ContextModel
    created_at: str
    updated_at: str


class MessageResponse(BaseModel):
    """Assistant reply for one turn."""
    session_id: str
    reply: str
    suggestions: List[str]
    intent: str
    confidence: float
    entities: Dict[str, List[str]]
    sentiment: str
    turn_count: int


class ClassifyResponse(BaseModel):
    intent: str
    confidence: float
    signal: str
    normalized_text: str
    entities: Dict[str, List[str]]
    sentiment: str


class IntentInfo(BaseModel):
    name: str
    description: Optional[str]
    dynamic: bool


# Dependencies
_directory: Optional[CampusDirectory] = None
_pipelines: Dict[int, AssistantPipeline] = {}


def get_directory() -> CampusDirectory:
    """Directory selected by settings, created on first use."""
    global _directory
    if _directory is None:
        _directory = build_directory(settings)
    return _directory


def get_pipeline(directory: CampusDirectory = Depends(get_directory)) -> AssistantPipeline:
    """One pipeline per directory so the response random source persists."""
    pipeline = _pipelines.get(id(directory))
    if pipeline is None or pipeline.dispatcher.directory is not directory:
        pipeline = AssistantPipeline(directory)
        _pipelines[id(directory)] = pipeline
    return pipeline


def get_state_manager() -> ConversationStateManager:
    return conversation_state_manager


async def close_directory():
    """Release the directory's network session, if it has one."""
    global _directory
    if _directory is not None and hasattr(_directory, "close"):
        await _directory.close()
    _directory = None
    _pipelines.clear()


@router.post("/sessions", status_code=status.HTTP_201_CREATED, response_model=SessionResponse)
async def create_session(
    state_manager: ConversationStateManager = Depends(get_state_manager)
) -> SessionResponse:
    """Start a new conversation session."""
    session = await state_manager.create_session()
    return SessionResponse(**session.to_dict())


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    state_manager: ConversationStateManager = Depends(get_state_manager)
) -> SessionResponse:
    """Get the context of a live session."""
    session = await state_manager.get_session(session_id)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session {session_id} not found"
        )
    return SessionResponse(**session.to_dict())


@router.delete("/sessions/{session_id}")
async def end_session(
    session_id: str,
    state_manager: ConversationStateManager = Depends(get_state_manager)
) -> Dict[str, Any]:
    """End a conversation session."""
    if not await state_manager.end_session(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session {session_id} not found"
        )
    return {
        "session_id": session_id,
        "ended": True,
        "timestamp": datetime.utcnow().isoformat()
    }


@router.post("/messages", response_model=MessageResponse)
async def send_message(
    request: MessageRequest,
    pipeline: AssistantPipeline = Depends(get_pipeline),
    state_manager: ConversationStateManager = Depends(get_state_manager)
) -> MessageResponse:
    """Process one user message within a session."""
    if request.session_id:
        session = await state_manager.get_session(request.session_id)
        if session is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Session {request.session_id} not found"
            )
    else:
        session = await state_manager.create_session()

    result = await pipeline.process_message(request.message, session.context)
    await state_manager.save_context(session.session_id, result.new_context)

    return MessageResponse(
        session_id=session.session_id,
        reply=result.text,
        suggestions=result.suggestions,
        intent=result.intent.value,
        confidence=result.confidence,
        entities=result.entities,
        sentiment=result.sentiment.value,
        turn_count=result.new_context.turn_count,
    )


@router.get("/intents", response_model=List[IntentInfo])
async def list_intents() -> List[IntentInfo]:
    """List every intent the assistant recognises."""
    return [
        IntentInfo(
            name=intent.value,
            description=INTENT_DESCRIPTIONS.get(intent),
            dynamic=intent in DYNAMIC_INTENTS,
        )
        for intent in IntentName
    ]


@router.post("/classify", response_model=ClassifyResponse)
async def classify_message(request: ClassifyRequest) -> ClassifyResponse:
    """Classify text without producing a reply."""
    result = intent_classifier.classify(request.message)
    return ClassifyResponse(
        intent=result.intent.value,
        confidence=result.confidence,
        signal=result.signal,
        normalized_text=result.normalized_text,
        entities=entity_extractor.extract(request.message),
        sentiment=sentiment(request.message).value,
    )


@router.get("/stats")
async def assistant_stats(
    state_manager: ConversationStateManager = Depends(get_state_manager)
) -> Dict[str, Any]:
    """Classifier and session statistics."""
    return {
        "classifier": intent_classifier.get_stats(),
        "sessions": state_manager.get_stats(),
        "timestamp": datetime.utcnow().isoformat()
    }
