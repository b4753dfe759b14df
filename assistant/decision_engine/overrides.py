"""
Priority override rules evaluated before generic intent scoring.

Organization questions are high value and compete poorly against short
generic patterns, so structural matches (organization plus position,
organization plus committee) force the intent. Rules are evaluated in order
and the first hit wins; add a rule by appending to OVERRIDE_RULES.
"""

import re
from dataclasses import dataclass
from typing import Callable, FrozenSet, Optional, Sequence, Tuple

from assistant.decision_engine.entity_extractor import EntityExtractor, entity_extractor
from assistant.lexicon.intents import IntentName

_TOKEN = re.compile(r"\w+")

OFFICER_TRIGGER_TOKENS: FrozenSet[str] = frozenset({"officer", "who", "sino"})


@dataclass(frozen=True)
class OverrideContext:
    """Lookups shared by every rule for one utterance."""
    original: str
    normalized: str
    organization: Optional[str]
    position: Optional[str]
    committee: Optional[str]

    @property
    def tokens(self) -> FrozenSet[str]:
        return frozenset(_TOKEN.findall(self.original)) | frozenset(_TOKEN.findall(self.normalized))

    @classmethod
    def build(
        cls,
        original: str,
        normalized: str,
        extractor: Optional[EntityExtractor] = None
    ) -> "OverrideContext":
        extractor = extractor or entity_extractor
        return cls(
            original=original,
            normalized=normalized,
            organization=extractor.extract_organization(original) or extractor.extract_organization(normalized),
            position=extractor.extract_position(original) or extractor.extract_position(normalized),
            committee=extractor.extract_committee(original) or extractor.extract_committee(normalized),
        )


@dataclass(frozen=True)
class OverrideRule:
    name: str
    intent: IntentName
    confidence: float
    applies: Callable[[OverrideContext], bool]


def _organization_and_position(ctx: OverrideContext) -> bool:
    return ctx.organization is not None and ctx.position is not None


def _organization_and_committee(ctx: OverrideContext) -> bool:
    return (
        ctx.organization is not None
        and ctx.committee is not None
        and "committee" in ctx.tokens
    )


def _organization_and_trigger(ctx: OverrideContext) -> bool:
    return ctx.organization is not None and bool(ctx.tokens & OFFICER_TRIGGER_TOKENS)


OVERRIDE_RULES: Tuple[OverrideRule, ...] = (
    OverrideRule("organization_position", IntentName.ORG_OFFICER, 1.0, _organization_and_position),
    OverrideRule("organization_committee", IntentName.ORG_COMMITTEE, 1.0, _organization_and_committee),
    OverrideRule("organization_officer_trigger", IntentName.ORG_OFFICER, 0.9, _organization_and_trigger),
)


def evaluate_overrides(
    ctx: OverrideContext,
    rules: Sequence[OverrideRule] = OVERRIDE_RULES
) -> Optional[OverrideRule]:
    """Return the first rule that applies, or None."""
    for rule in rules:
        if rule.applies(ctx):
            return rule
    return None
