"""
Lexicon store - immutable tables shared by every conversation.
"""

from assistant.lexicon.entities import (
    COMMITTEE_KEYWORDS,
    COMMITTEES,
    ENTITY_PATTERNS,
    ORGANIZATION_ALIAS_ORDER,
    ORGANIZATION_ALIASES,
    ORGANIZATIONS,
    POSITION_KEYWORDS,
    POSITIONS,
    Committee,
    Organization,
    Position,
)
from assistant.lexicon.intents import (
    DYNAMIC_INTENTS,
    INTENT_DEFINITIONS,
    INTENT_DESCRIPTIONS,
    IntentDefinition,
    IntentName,
)
from assistant.lexicon.sentiment import NEGATIVE_WORDS, POSITIVE_WORDS
from assistant.lexicon.typos import FILLER_WORDS, TYPO_CORRECTIONS

__all__ = [
    "COMMITTEE_KEYWORDS",
    "COMMITTEES",
    "DYNAMIC_INTENTS",
    "ENTITY_PATTERNS",
    "FILLER_WORDS",
    "INTENT_DEFINITIONS",
    "INTENT_DESCRIPTIONS",
    "NEGATIVE_WORDS",
    "ORGANIZATION_ALIAS_ORDER",
    "ORGANIZATION_ALIASES",
    "ORGANIZATIONS",
    "POSITION_KEYWORDS",
    "POSITIONS",
    "POSITIVE_WORDS",
    "TYPO_CORRECTIONS",
    "Committee",
    "IntentDefinition",
    "IntentName",
    "Organization",
    "Position",
]
