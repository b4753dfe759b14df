"""Tests for the static lexicon tables."""

import pytest

from assistant.decision_engine import entity_extractor, normalize
from assistant.lexicon import (
    COMMITTEE_KEYWORDS,
    COMMITTEES,
    ENTITY_PATTERNS,
    FILLER_WORDS,
    INTENT_DEFINITIONS,
    INTENT_DESCRIPTIONS,
    ORGANIZATION_ALIAS_ORDER,
    POSITION_KEYWORDS,
    POSITIONS,
    TYPO_CORRECTIONS,
    IntentDefinition,
    IntentName,
)
from assistant.lexicon.intents import _validate_definitions
from assistant.lexicon.responses import FOLLOW_UP_SUGGESTIONS, MAX_SUGGESTIONS, RESPONSE_TEMPLATES

ALL_PATTERNS = [
    (definition.name, pattern)
    for definition in INTENT_DEFINITIONS
    for pattern in definition.patterns
]


class TestIntentTable:
    """Test the intent pattern table."""

    def test_every_intent_but_unknown_is_defined(self):
        """Every recognisable intent has patterns."""
        defined = {definition.name for definition in INTENT_DEFINITIONS}
        assert defined == set(IntentName) - {IntentName.UNKNOWN}

    @pytest.mark.parametrize("intent,pattern", ALL_PATTERNS)
    def test_patterns_are_normalized(self, intent, pattern):
        """Patterns must survive normalization unchanged to be matched exactly."""
        assert normalize(pattern) == pattern

    @pytest.mark.parametrize("intent,pattern", ALL_PATTERNS)
    def test_patterns_do_not_mention_organizations(self, intent, pattern):
        """An organization alias in a pattern would trip the priority overrides."""
        assert entity_extractor.extract_organization(pattern) is None

    def test_patterns_are_unique(self):
        """No pattern is registered for two intents."""
        patterns = [pattern for _, pattern in ALL_PATTERNS]
        assert len(patterns) == len(set(patterns))

    def test_weights_are_in_range(self):
        """Weights are positive and at most one."""
        for definition in INTENT_DEFINITIONS:
            assert 0 < definition.weight <= 1.0

    def test_every_intent_has_a_description(self):
        """Test descriptions cover the whole enum."""
        assert set(INTENT_DESCRIPTIONS) == set(IntentName)

    def test_empty_patterns_rejected(self):
        """Test that an intent without patterns is a configuration error."""
        with pytest.raises(ValueError):
            IntentDefinition(IntentName.GREETING, ())

    def test_non_positive_weight_rejected(self):
        """Test that a zero weight is a configuration error."""
        with pytest.raises(ValueError):
            IntentDefinition(IntentName.GREETING, ("hello",), weight=0)

    def test_duplicate_intent_rejected(self):
        """Test that the same intent cannot be defined twice."""
        definitions = (
            IntentDefinition(IntentName.GREETING, ("hello",)),
            IntentDefinition(IntentName.GREETING, ("hey",)),
        )
        with pytest.raises(ValueError):
            _validate_definitions(definitions)

    def test_shared_pattern_rejected(self):
        """Test that a pattern cannot belong to two intents."""
        definitions = (
            IntentDefinition(IntentName.GREETING, ("hello",)),
            IntentDefinition(IntentName.THANKS, ("hello",)),
        )
        with pytest.raises(ValueError):
            _validate_definitions(definitions)


class TestTypoTable:
    """Test the typo and filler tables."""

    def test_corrections_are_not_typos(self):
        """A canonical value is never corrected again."""
        for canonical in TYPO_CORRECTIONS.values():
            assert canonical not in TYPO_CORRECTIONS

    def test_corrections_are_not_fillers(self):
        """A canonical value is never dropped as filler."""
        for canonical in TYPO_CORRECTIONS.values():
            assert canonical not in FILLER_WORDS

    def test_fillers_are_not_typos(self):
        """Test filler words and typo keys do not overlap."""
        assert not set(FILLER_WORDS) & set(TYPO_CORRECTIONS)

    def test_tables_are_read_only(self):
        """Test that lexicon mappings cannot be mutated."""
        with pytest.raises(TypeError):
            TYPO_CORRECTIONS["sched"] = "schedule"


class TestEntityTables:
    """Test organization, position and committee tables."""

    def test_entity_pattern_types(self):
        """Test every entity type has a compiled pattern."""
        assert set(ENTITY_PATTERNS) == {"time", "day", "room", "organization", "subject", "position"}

    def test_aliases_longest_first(self):
        """Test aliases are scanned longest first."""
        lengths = [len(alias) for alias in ORGANIZATION_ALIAS_ORDER]
        assert lengths == sorted(lengths, reverse=True)

    def test_position_keywords_reference_known_positions(self):
        """Test position keywords map to position ids."""
        for _, position_id in POSITION_KEYWORDS:
            assert position_id in POSITIONS

    def test_committee_keywords_reference_known_committees(self):
        """Test committee keywords map to committee ids."""
        for _, committee_id in COMMITTEE_KEYWORDS:
            assert committee_id in COMMITTEES

    def test_specific_positions_precede_generic(self):
        """'vice president' must be tried before 'president'."""
        keywords = [keyword for keyword, _ in POSITION_KEYWORDS]
        assert keywords.index("vice president") < keywords.index("president")
        assert keywords.index("secretary general") < keywords.index("secretary")


class TestResponseTables:
    """Test response templates and suggestions."""

    def test_unknown_has_fallbacks(self):
        """Test UNKNOWN carries the fallback pool and suggestions."""
        assert RESPONSE_TEMPLATES[IntentName.UNKNOWN]
        assert FOLLOW_UP_SUGGESTIONS[IntentName.UNKNOWN]

    def test_suggestion_limit(self):
        """Test no intent offers more than four suggestions."""
        for suggestions in FOLLOW_UP_SUGGESTIONS.values():
            assert len(suggestions) <= MAX_SUGGESTIONS
