"""
Response dispatch for classified intents.

Directory-backed intents (officers, committees, room counts) are answered
from a CampusDirectory; every other intent draws a template from its pool.
Lookup errors never escape: they become an apology message.
"""

import logging
import random
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from app.core.config import settings

from assistant.conversation.state_manager import ConversationContext
from assistant.decision_engine.entity_extractor import EntityExtractor, entity_extractor
from assistant.decision_engine.normalizer import lower_trim, normalize
from assistant.decision_engine.sentiment_analyzer import Sentiment
from assistant.directory.base import CampusDirectory
from assistant.lexicon import responses
from assistant.lexicon.entities import COMMITTEES, ORGANIZATION_ALIASES, ORGANIZATIONS, POSITIONS
from assistant.lexicon.intents import DYNAMIC_INTENTS, IntentName

logger = logging.getLogger(__name__)

_ORGANIZATION_WORD = re.compile(r"organizations?", re.IGNORECASE)


@dataclass(frozen=True)
class AssistantReply:
    text: str
    suggestions: List[str] = field(default_factory=list)


class ResponseDispatcher:
    """Turns a classified intent into reply text and follow-up suggestions."""

    def __init__(
        self,
        directory: CampusDirectory,
        rng: Optional[random.Random] = None,
        extractor: Optional[EntityExtractor] = None
    ):
        self.directory = directory
        self.rng = rng or random.Random(settings.RESPONSE_RANDOM_SEED)
        self.extractor = extractor or entity_extractor

    async def respond(
        self,
        intent: IntentName,
        entities: Dict[str, List[str]],
        sentiment: Sentiment,
        context: Optional[ConversationContext],
        raw_input: str
    ) -> AssistantReply:
        """
        Build the reply for one turn.

        Args:
            intent: Classified intent
            entities: Entities extracted from this turn
            sentiment: Sentiment of the utterance
            context: Conversation context before this turn
            raw_input: The user's original text

        Returns:
            AssistantReply: reply text and at most four suggestions
        """
        if intent in DYNAMIC_INTENTS:
            text = await self._respond_dynamic(intent, raw_input or "")
        else:
            text = self._respond_static(intent, entities)

        if sentiment is Sentiment.NEGATIVE:
            text = f"{responses.NEGATIVE_SENTIMENT_PREFIX}\n\n{text}"

        if context is not None:
            logger.debug(f"Responded to {intent.value} on turn {context.turn_count + 1}")

        return AssistantReply(text=text, suggestions=self.suggestions_for(intent))

    def suggestions_for(self, intent: IntentName) -> List[str]:
        suggestions = responses.FOLLOW_UP_SUGGESTIONS.get(intent) or responses.FOLLOW_UP_SUGGESTIONS[IntentName.UNKNOWN]
        return list(suggestions)[:responses.MAX_SUGGESTIONS]

    def _respond_static(self, intent: IntentName, entities: Dict[str, List[str]]) -> str:
        pool = responses.RESPONSE_TEMPLATES.get(intent) or responses.RESPONSE_TEMPLATES[IntentName.UNKNOWN]
        text = self.rng.choice(pool)

        mentioned = entities.get("organization")
        if mentioned:
            alias = mentioned[0].lower()
            org = ORGANIZATION_ALIASES.get(alias)
            code = org.code if org else mentioned[0].upper()
            text = _ORGANIZATION_WORD.sub(code, text)

        return text

    def _lookup_in(self, raw_input: str, lookup) -> Optional[str]:
        # Lookups see both the raw wording and the typo-corrected form
        return lookup(lower_trim(raw_input)) or lookup(normalize(raw_input))

    async def _respond_dynamic(self, intent: IntentName, raw_input: str) -> str:
        try:
            if intent is IntentName.ROOM_STATS:
                return await self._room_statistics()

            org_code = self._lookup_in(raw_input, self.extractor.extract_organization)
            if org_code is None:
                return responses.ORGANIZATION_CLARIFY.format(organizations=", ".join(ORGANIZATIONS))

            if intent is IntentName.ORG_OFFICER:
                position_id = self._lookup_in(raw_input, self.extractor.extract_position)
                if position_id is None:
                    return await self._officer_list(org_code)
                return await self._officer(org_code, position_id)

            if intent is IntentName.ORG_OFFICER_LIST:
                return await self._officer_list(org_code)

            committee_id = self._lookup_in(raw_input, self.extractor.extract_committee)
            if committee_id is None:
                return responses.COMMITTEE_CLARIFY.format(
                    organization=org_code,
                    committees=", ".join(c.title for c in COMMITTEES.values()),
                )
            return await self._committee(org_code, committee_id)

        except Exception as e:
            logger.error(f"Directory lookup for {intent.value} failed: {e}")
            return responses.LOOKUP_FAILED

    async def _officer(self, org_code: str, position_id: str) -> str:
        position_title = POSITIONS[position_id].title
        record = await self.directory.lookup_officer(org_code, position_id)
        if not record or not record.name:
            return responses.OFFICER_NOT_FOUND.format(position=position_title, organization=org_code)
        return responses.OFFICER_FOUND.format(
            position=record.position_title or position_title,
            organization=org_code,
            name=record.name,
        )

    async def _officer_list(self, org_code: str) -> str:
        listing = await self.directory.lookup_all_officers(org_code)
        if not listing or not listing.officers:
            return responses.OFFICER_LIST_NOT_FOUND.format(organization=org_code)
        officers = "\n".join(f"• {officer.position}: {officer.name}" for officer in listing.officers)
        return responses.OFFICER_LIST_FOUND.format(organization=org_code, officers=officers)

    async def _committee(self, org_code: str, committee_id: str) -> str:
        committee_title = COMMITTEES[committee_id].title
        roster = await self.directory.lookup_committee(org_code, committee_id)
        if not roster or not roster.members:
            return responses.COMMITTEE_NOT_FOUND.format(committee=committee_title, organization=org_code)
        members = "\n".join(f"• {member.name}" for member in roster.members)
        return responses.COMMITTEE_FOUND.format(
            committee=roster.committee_title or committee_title,
            organization=org_code,
            members=members,
        )

    async def _room_statistics(self) -> str:
        stats = await self.directory.lookup_room_statistics()
        if not stats:
            return responses.ROOM_STATS_NOT_FOUND
        return responses.ROOM_STATS_FOUND.format(
            total=stats.total,
            vacant=stats.vacant,
            occupied=stats.occupied,
        )
