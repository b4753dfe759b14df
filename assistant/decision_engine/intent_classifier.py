"""
Intent classification engine for the campus assistant.

Combines a priority override step with a generic scorer that runs five
independent signals (exact, forward containment, reverse containment, fuzzy
whole-string, word overlap) over the normalized and the original utterance
and keeps the single best candidate.
"""

import logging
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from app.core.config import settings

from assistant.decision_engine.entity_extractor import EntityExtractor, entity_extractor
from assistant.decision_engine.fuzzy_matcher import fuzzy_contains, similarity
from assistant.decision_engine.normalizer import lower_trim, normalize
from assistant.decision_engine.overrides import (
    OVERRIDE_RULES,
    OverrideContext,
    OverrideRule,
    evaluate_overrides,
)
from assistant.lexicon.intents import (
    INTENT_DEFINITIONS,
    INTENT_DESCRIPTIONS,
    IntentDefinition,
    IntentName,
)

logger = logging.getLogger(__name__)


SIGNAL_EXACT = "exact"
SIGNAL_OVERRIDE = "override"
SIGNAL_FORWARD = "forward_containment"
SIGNAL_REVERSE = "reverse_containment"
SIGNAL_FUZZY = "fuzzy"
SIGNAL_OVERLAP = "word_overlap"
SIGNAL_NONE = "none"


@dataclass(frozen=True)
class ScoringConfig:
    """Thresholds and multipliers for the generic scorer."""
    fuzzy_threshold: float = 0.55
    word_similarity_threshold: float = 0.7
    word_overlap_threshold: float = 0.6
    unknown_threshold: float = 0.12
    forward_multiplier: float = 1.5
    reverse_weight: float = 0.6
    fuzzy_weight: float = 0.7
    overlap_weight: float = 0.8
    min_reverse_length: int = 3
    min_word_length: int = 3

    @classmethod
    def from_settings(cls, app_settings=settings) -> "ScoringConfig":
        return cls(
            fuzzy_threshold=app_settings.FUZZY_MATCH_THRESHOLD,
            word_similarity_threshold=app_settings.WORD_SIMILARITY_THRESHOLD,
            word_overlap_threshold=app_settings.WORD_OVERLAP_THRESHOLD,
            unknown_threshold=app_settings.INTENT_CONFIDENCE_THRESHOLD,
            forward_multiplier=app_settings.FORWARD_CONTAINMENT_MULTIPLIER,
            reverse_weight=app_settings.REVERSE_CONTAINMENT_WEIGHT,
            fuzzy_weight=app_settings.FUZZY_MATCH_WEIGHT,
            overlap_weight=app_settings.WORD_OVERLAP_WEIGHT,
        )


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying one utterance."""
    intent: IntentName
    confidence: float
    signal: str = SIGNAL_NONE
    normalized_text: str = ""

    def __post_init__(self):
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"Confidence out of range: {self.confidence}")

    @property
    def is_unknown(self) -> bool:
        return self.intent is IntentName.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        return {
            "intent": self.intent.value,
            "confidence": self.confidence,
            "signal": self.signal,
            "normalized_text": self.normalized_text,
        }


def exact_match(candidate: str, pattern: str) -> bool:
    return candidate == pattern


def forward_containment(candidate: str, pattern: str, weight: float, config: ScoringConfig) -> float:
    """Pattern inside the utterance; longer share of the utterance scores higher."""
    if pattern not in candidate:
        return 0.0
    share = len(pattern) / max(len(candidate), 1)
    return min(share * weight * config.forward_multiplier, 1.0)


def reverse_containment(candidate: str, pattern: str, weight: float, config: ScoringConfig) -> float:
    """Utterance inside the pattern, e.g. a truncated phrase."""
    if len(candidate) < config.min_reverse_length or candidate not in pattern:
        return 0.0
    return config.reverse_weight * weight


def fuzzy_match(candidate: str, pattern: str, weight: float, config: ScoringConfig) -> float:
    if not fuzzy_contains(candidate, pattern, config.fuzzy_threshold):
        return 0.0
    return config.fuzzy_weight * weight


def word_overlap(candidate: str, pattern: str, weight: float, config: ScoringConfig) -> float:
    """Share of pattern words with a similar word in the utterance."""
    pattern_words = [w for w in pattern.split() if len(w) >= config.min_word_length]
    if not pattern_words:
        return 0.0
    candidate_words = [w for w in candidate.split() if len(w) >= config.min_word_length]

    matched = sum(
        1 for pattern_word in pattern_words
        if any(
            similarity(candidate_word, pattern_word) >= config.word_similarity_threshold
            for candidate_word in candidate_words
        )
    )
    ratio = matched / len(pattern_words)
    if ratio < config.word_overlap_threshold:
        return 0.0
    return ratio * weight * config.overlap_weight


SignalFn = Callable[[str, str, float, ScoringConfig], float]

SIGNALS: Tuple[Tuple[str, SignalFn], ...] = (
    (SIGNAL_FORWARD, forward_containment),
    (SIGNAL_REVERSE, reverse_containment),
    (SIGNAL_FUZZY, fuzzy_match),
    (SIGNAL_OVERLAP, word_overlap),
)


@dataclass
class _Best:
    intent: IntentName = IntentName.UNKNOWN
    confidence: float = 0.0
    signal: str = SIGNAL_NONE


class IntentClassifier:
    """Heuristic intent classifier with priority overrides and usage statistics."""

    def __init__(
        self,
        definitions: Sequence[IntentDefinition] = INTENT_DEFINITIONS,
        config: Optional[ScoringConfig] = None,
        extractor: Optional[EntityExtractor] = None,
        override_rules: Sequence[OverrideRule] = OVERRIDE_RULES
    ):
        self.definitions = tuple(definitions)
        self.config = config or ScoringConfig.from_settings()
        self.extractor = extractor or entity_extractor
        self.override_rules = tuple(override_rules)

        # Statistics
        self.stats = self._empty_stats()

    def classify(self, text: Optional[str]) -> ClassificationResult:
        """
        Classify an utterance.

        Args:
            text: Raw user input

        Returns:
            ClassificationResult: intent, confidence and the signal that decided it
        """
        start_time = time.time()
        try:
            normalized = normalize(text)
            original = lower_trim(text)

            override = evaluate_overrides(
                OverrideContext.build(original, normalized, self.extractor),
                self.override_rules
            )
            if override:
                result = ClassificationResult(
                    intent=override.intent,
                    confidence=override.confidence,
                    signal=SIGNAL_OVERRIDE,
                    normalized_text=normalized,
                )
                logger.debug(f"Override '{override.name}' forced {override.intent.value}")
            else:
                result = self.score(normalized, original)

        except Exception as e:
            logger.error(f"Error classifying intent: {e}")
            result = ClassificationResult(IntentName.UNKNOWN, 0.0, SIGNAL_NONE, "")

        self._update_stats(result, (time.time() - start_time) * 1000)
        return result

    def score(self, normalized: str, original: str) -> ClassificationResult:
        """Run the generic scorer over both candidate strings."""
        candidates = [c for c in dict.fromkeys((normalized, original)) if c]
        best = _Best()

        for candidate in candidates:
            for definition in self.definitions:
                for pattern in definition.patterns:
                    if exact_match(candidate, pattern):
                        return ClassificationResult(definition.name, 1.0, SIGNAL_EXACT, normalized)

                    for signal_name, signal in SIGNALS:
                        confidence = min(signal(candidate, pattern, definition.weight, self.config), 1.0)
                        if confidence > best.confidence:
                            best = _Best(definition.name, confidence, signal_name)

        if best.confidence < self.config.unknown_threshold:
            logger.debug(f"Best confidence {best.confidence:.3f} below threshold, returning unknown")
            return ClassificationResult(IntentName.UNKNOWN, 0.0, SIGNAL_NONE, normalized)

        logger.debug(f"Classified '{normalized}' as {best.intent.value} ({best.confidence:.3f} via {best.signal})")
        return ClassificationResult(best.intent, best.confidence, best.signal, normalized)

    def _update_stats(self, result: ClassificationResult, processing_time_ms: float):
        """Update classification statistics."""
        try:
            self.stats["classifications_completed"] += 1
            completed = self.stats["classifications_completed"]

            # Update average confidence
            total_confidence = self.stats["average_confidence"] * (completed - 1)
            self.stats["average_confidence"] = (total_confidence + result.confidence) / completed

            # Update intent distribution
            intent_name = result.intent.value
            self.stats["intent_distribution"][intent_name] = self.stats["intent_distribution"].get(intent_name, 0) + 1

            # Update signal usage
            self.stats["signal_usage"][result.signal] = self.stats["signal_usage"].get(result.signal, 0) + 1

            # Update processing time
            total_time = self.stats["processing_time_ms"] * (completed - 1)
            self.stats["processing_time_ms"] = (total_time + processing_time_ms) / completed

        except Exception as e:
            logger.error(f"Error updating stats: {e}")

    def get_available_intents(self) -> List[str]:
        """Get list of available intent names."""
        return [intent.value for intent in IntentName]

    def get_intent_description(self, intent_name: str) -> Optional[str]:
        """Get description for an intent."""
        try:
            return INTENT_DESCRIPTIONS.get(IntentName(intent_name))
        except ValueError:
            return None

    def get_stats(self) -> Dict[str, Any]:
        """Get classification statistics."""
        stats = self.stats.copy()
        stats["intent_distribution"] = dict(self.stats["intent_distribution"])
        stats["signal_usage"] = dict(self.stats["signal_usage"])
        return stats

    def reset_stats(self):
        """Reset classification statistics."""
        self.stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "classifications_completed": 0,
            "average_confidence": 0.0,
            "intent_distribution": {},
            "signal_usage": {},
            "processing_time_ms": 0.0,
        }

    def health_check(self) -> Dict[str, Any]:
        """Classify a known phrase to confirm the lexicon loaded."""
        try:
            test_result = self.classify("hello")
            return {
                "healthy": test_result.intent is IntentName.GREETING,
                "available_intents": len(self.get_available_intents()),
                "patterns_loaded": sum(len(d.patterns) for d in self.definitions),
                "test_classification": test_result.to_dict(),
                "timestamp": datetime.utcnow().isoformat()
            }
        except Exception as e:
            logger.error(f"Intent classifier health check failed: {e}")
            return {
                "healthy": False,
                "error": str(e),
                "timestamp": datetime.utcnow().isoformat()
            }


# Global intent classifier instance
intent_classifier = IntentClassifier()
