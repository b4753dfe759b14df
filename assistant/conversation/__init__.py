"""
Conversation management module for the campus assistant.
Contains per-turn context tracking and response dispatch.
"""

from .pipeline import AssistantPipeline, PipelineResult
from .response_dispatcher import AssistantReply, ResponseDispatcher
from .state_manager import (
    ConversationContext,
    ConversationSession,
    ConversationStateManager,
    conversation_state_manager,
    update_context,
)

__all__ = [
    'AssistantPipeline',
    'AssistantReply',
    'ConversationContext',
    'ConversationSession',
    'ConversationStateManager',
    'PipelineResult',
    'ResponseDispatcher',
    'conversation_state_manager',
    'update_context',
]
