"""
Regex-driven entity extraction plus dedicated organization, position and
committee lookups used by the priority overrides and the directory handlers.
"""

import logging
import re
from typing import Dict, List, Optional, Pattern, Tuple

from assistant.lexicon.entities import (
    COMMITTEE_KEYWORDS,
    ENTITY_PATTERNS,
    ORGANIZATION_ALIAS_ORDER,
    ORGANIZATION_ALIASES,
    POSITION_KEYWORDS,
)

logger = logging.getLogger(__name__)

EntityBag = Dict[str, List[str]]


def _word_bounded(phrase: str) -> Pattern:
    return re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE)


class EntityExtractor:
    """Finds typed spans (time, day, room, organization, subject, position) in text."""

    def __init__(self, patterns: Optional[Dict[str, Pattern]] = None):
        self.patterns = dict(patterns if patterns is not None else ENTITY_PATTERNS)
        self._organization_lookup: Tuple[Tuple[Pattern, str], ...] = tuple(
            (_word_bounded(alias), ORGANIZATION_ALIASES[alias].code)
            for alias in ORGANIZATION_ALIAS_ORDER
        )
        self._position_lookup: Tuple[Tuple[Pattern, str], ...] = tuple(
            (_word_bounded(keyword), position_id)
            for keyword, position_id in POSITION_KEYWORDS
        )
        self._committee_lookup: Tuple[Tuple[Pattern, str], ...] = tuple(
            (_word_bounded(keyword), committee_id)
            for keyword, committee_id in COMMITTEE_KEYWORDS
        )

    def extract(self, text: Optional[str]) -> EntityBag:
        """
        Extract every entity type from text.

        Matches keep their surface form, are deduplicated in first-seen order,
        and types without a match are left out of the result.
        """
        entities: EntityBag = {}
        if not text:
            return entities

        for entity_type, pattern in self.patterns.items():
            matches: List[str] = []
            for match in pattern.finditer(text):
                surface = match.group(0).strip()
                if surface and surface not in matches:
                    matches.append(surface)

            if matches:
                entities[entity_type] = matches

        if entities:
            logger.debug(f"Extracted entities: {entities}")
        return entities

    def extract_organization(self, text: Optional[str]) -> Optional[str]:
        """Return the organization code of the longest alias found in text."""
        return self._first_match(self._organization_lookup, text)

    def extract_position(self, text: Optional[str]) -> Optional[str]:
        """Return the position id of the first (most specific) keyword found."""
        return self._first_match(self._position_lookup, text)

    def extract_committee(self, text: Optional[str]) -> Optional[str]:
        """Return the committee id of the first (most specific) keyword found."""
        return self._first_match(self._committee_lookup, text)

    @staticmethod
    def _first_match(lookup: Tuple[Tuple[Pattern, str], ...], text: Optional[str]) -> Optional[str]:
        if not text:
            return None
        for pattern, value in lookup:
            if pattern.search(text):
                return value
        return None


# Global entity extractor instance
entity_extractor = EntityExtractor()
