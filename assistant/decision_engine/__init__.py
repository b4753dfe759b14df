"""
Decision engine module for the campus assistant.
Contains normalization, fuzzy matching, entity extraction, sentiment and
intent classification.
"""

from .entity_extractor import EntityBag, EntityExtractor, entity_extractor
from .fuzzy_matcher import distance, fuzzy_contains, similarity
from .intent_classifier import (
    ClassificationResult,
    IntentClassifier,
    ScoringConfig,
    intent_classifier,
)
from .normalizer import normalize
from .overrides import OVERRIDE_RULES, OverrideContext, OverrideRule, evaluate_overrides
from .sentiment_analyzer import Sentiment, sentiment

__all__ = [
    'ClassificationResult',
    'EntityBag',
    'EntityExtractor',
    'IntentClassifier',
    'OVERRIDE_RULES',
    'OverrideContext',
    'OverrideRule',
    'ScoringConfig',
    'Sentiment',
    'distance',
    'entity_extractor',
    'evaluate_overrides',
    'fuzzy_contains',
    'intent_classifier',
    'normalize',
    'sentiment',
    'similarity',
]
