"""
Single entry point for one conversational turn:
normalize, extract, classify, score sentiment, respond, update context.
"""

import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from assistant.conversation.response_dispatcher import ResponseDispatcher
from assistant.conversation.state_manager import ConversationContext, update_context
from assistant.decision_engine.entity_extractor import EntityExtractor, entity_extractor
from assistant.decision_engine.intent_classifier import IntentClassifier, intent_classifier
from assistant.decision_engine.sentiment_analyzer import Sentiment, sentiment
from assistant.directory.base import CampusDirectory
from assistant.lexicon.intents import IntentName

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Everything produced by one turn."""
    text: str
    suggestions: List[str]
    intent: IntentName
    entities: Dict[str, List[str]]
    confidence: float
    sentiment: Sentiment
    new_context: ConversationContext
    signal: str = "none"
    normalized_text: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "suggestions": list(self.suggestions),
            "intent": self.intent.value,
            "entities": self.entities,
            "confidence": self.confidence,
            "sentiment": self.sentiment.value,
            "new_context": self.new_context.to_dict(),
            "signal": self.signal,
            "normalized_text": self.normalized_text,
        }


class AssistantPipeline:
    """Runs the text-understanding pipeline for the campus assistant."""

    def __init__(
        self,
        directory: CampusDirectory,
        classifier: Optional[IntentClassifier] = None,
        extractor: Optional[EntityExtractor] = None,
        rng: Optional[random.Random] = None
    ):
        self.classifier = classifier or intent_classifier
        self.extractor = extractor or entity_extractor
        self.dispatcher = ResponseDispatcher(directory, rng=rng, extractor=self.extractor)

    async def process_message(
        self,
        text: str,
        context: Optional[ConversationContext] = None
    ) -> PipelineResult:
        """
        Process one user message.

        Classification and extraction are synchronous; only a directory
        lookup in the dispatcher suspends.
        """
        context = context or ConversationContext()
        text = text or ""

        entities = self.extractor.extract(text)
        classification = self.classifier.classify(text)
        mood = sentiment(text)

        reply = await self.dispatcher.respond(
            classification.intent,
            entities,
            mood,
            context,
            text,
        )
        new_context = update_context(context, classification.intent, entities)

        logger.info(
            f"Turn {new_context.turn_count}: {classification.intent.value} "
            f"({classification.confidence:.2f}, {classification.signal}), sentiment {mood.value}"
        )

        return PipelineResult(
            text=reply.text,
            suggestions=reply.suggestions,
            intent=classification.intent,
            entities=entities,
            confidence=classification.confidence,
            sentiment=mood,
            new_context=new_context,
            signal=classification.signal,
            normalized_text=classification.normalized_text,
        )
