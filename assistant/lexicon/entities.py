"""
Entity tables: campus organizations, officer positions, committees and the
regular expressions used to pull typed spans out of an utterance.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Pattern, Tuple


@dataclass(frozen=True)
class Organization:
    code: str
    display_name: str


@dataclass(frozen=True)
class Position:
    id: str
    title: str
    priority: int


@dataclass(frozen=True)
class Committee:
    id: str
    title: str


ORGANIZATIONS = MappingProxyType({
    org.code: org
    for org in (
        Organization("CSG", "Central Student Government"),
        Organization("CSC", "Computer Science Clique"),
        Organization("BITS", "Builders of Innovative Technologist Society"),
        Organization("BMS", "Business Management Society"),
        Organization("CC", "Cavite Communicators"),
        Organization("CHLS", "Circle of Hospitality and Tourism Students"),
        Organization("CYLE", "Cavite Young Leaders for Entrepreneurship"),
        Organization("EDGE", "Educators' Guild for Excellence"),
        Organization("SMSP", "Samahan ng mga Magaaral ng Sikolohiya"),
        Organization("YOPA", "Young Office Professional Advocates"),
        Organization("ST", "Sinag-Tala"),
        Organization("TF", "The Flare"),
        Organization("HS", "Honor Society"),
    )
})


def _build_aliases():
    aliases = {}
    for org in ORGANIZATIONS.values():
        # "st" collides with ordinal suffixes ("1st") and street abbreviations
        if org.code != "ST":
            aliases[org.code.lower()] = org
        aliases[org.display_name.lower()] = org

    extra = {
        "student government": "CSG",
        "student council": "CSG",
        "cs clique": "CSC",
        "computer science society": "CSC",
        "educators guild for excellence": "EDGE",
        "educators guild": "EDGE",
        "sinag tala": "ST",
        "flare": "TF",
        "honor society": "HS",
    }
    for alias, code in extra.items():
        aliases[alias] = ORGANIZATIONS[code]
    return aliases


# Free-text alias -> organization, all aliases lowercase
ORGANIZATION_ALIASES = MappingProxyType(_build_aliases())

# Longest alias first so "computer science clique" wins over shorter overlaps
ORGANIZATION_ALIAS_ORDER: Tuple[str, ...] = tuple(
    sorted(ORGANIZATION_ALIASES, key=lambda alias: (-len(alias), alias))
)


POSITIONS = MappingProxyType({
    pos.id: pos
    for pos in (
        Position("president", "President", 1),
        Position("vp_internal", "Vice President for Internal Affairs", 2),
        Position("vp_external", "Vice President for External Affairs", 3),
        Position("secretary_general", "Secretary General", 4),
        Position("treasurer_general", "Treasurer General", 5),
        Position("auditor", "Auditor", 6),
        Position("pro", "Public Relations Officer", 7),
    )
})

# Scanned in order; specific phrases precede the generic words they contain
POSITION_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("vice president for internal affairs", "vp_internal"),
    ("vice president for external affairs", "vp_external"),
    ("internal vice president", "vp_internal"),
    ("external vice president", "vp_external"),
    ("vp internal", "vp_internal"),
    ("vp external", "vp_external"),
    ("vp for internal", "vp_internal"),
    ("vp for external", "vp_external"),
    ("vice president", "vp_internal"),
    ("vice-president", "vp_internal"),
    ("bise presidente", "vp_internal"),
    ("vp", "vp_internal"),
    ("secretary general", "secretary_general"),
    ("secretary", "secretary_general"),
    ("kalihim", "secretary_general"),
    ("treasurer general", "treasurer_general"),
    ("treasurer", "treasurer_general"),
    ("ingat-yaman", "treasurer_general"),
    ("ingat yaman", "treasurer_general"),
    ("auditor", "auditor"),
    ("public relations officer", "pro"),
    ("public relations", "pro"),
    ("pro", "pro"),
    ("president", "president"),
    ("presidente", "president"),
    ("pangulo", "president"),
)


COMMITTEES = MappingProxyType({
    committee.id: committee
    for committee in (
        Committee("internal_affairs", "Internal Affairs Committee"),
        Committee("external_affairs", "External Affairs Committee"),
        Committee("membership_dues", "Membership and Dues Committee"),
        Committee("secretariat", "Secretariat Committee"),
        Committee("publicity", "Publicity Committee"),
        Committee("multimedia", "Multimedia Committee"),
        Committee("finance_sponsorship", "Finance and Sponsorship Committee"),
        Committee("audits", "Audits Committee"),
    )
})

COMMITTEE_KEYWORDS: Tuple[Tuple[str, str], ...] = (
    ("internal affairs", "internal_affairs"),
    ("external affairs", "external_affairs"),
    ("membership and dues", "membership_dues"),
    ("membership", "membership_dues"),
    ("dues", "membership_dues"),
    ("secretariat", "secretariat"),
    ("publicity", "publicity"),
    ("multimedia", "multimedia"),
    ("finance and sponsorship", "finance_sponsorship"),
    ("finance", "finance_sponsorship"),
    ("sponsorship", "finance_sponsorship"),
    ("audits", "audits"),
    ("audit", "audits"),
)


def keyword_regex(keywords: Iterable[str]) -> Pattern:
    """Compile keywords into one case-insensitive word-bounded alternation."""
    alternation = "|".join(re.escape(keyword) for keyword in keywords)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


_TIME = (
    r"\b(?:[01]?\d|2[0-3]):[0-5]\d(?:\s*(?:am|pm))?\b"
    r"|\b(?:1[0-2]|0?[1-9])\s*(?:am|pm)\b"
    r"|\b(?:morning|afternoon|evening|noon|midnight|umaga|tanghali|hapon|gabi)\b"
)

_DAY = (
    r"\b(?:monday|tuesday|wednesday|thursday|friday|saturday|sunday"
    r"|today|tonight|tomorrow|yesterday|weekend"
    r"|lunes|martes|miyerkules|huwebes|biyernes|sabado|linggo|bukas|ngayon)\b"
)

_ROOM = (
    r"\b(?:room|rm|kwarto|silid)\s*#?\s*[a-z]?\d{2,4}[a-z]?\b"
    r"|\b(?:nb|ob)-?\s?\d{3}\b"
    r"|\bcomp\s?lab\s?\d\b"
)

_SUBJECT = (
    r"\b(?:cosc|itec|dcit|gned|fitt|nstp|math|engl)\s?\d{2,3}[a-z]?\b"
    r"|\b(?:mathematics|calculus|statistics|programming|networking|database"
    r"|data structures|algorithms?|physics|chemistry|biology|accounting"
    r"|psychology|english|filipino|history)\b"
)


ENTITY_PATTERNS = MappingProxyType({
    "time": re.compile(_TIME, re.IGNORECASE),
    "day": re.compile(_DAY, re.IGNORECASE),
    "room": re.compile(_ROOM, re.IGNORECASE),
    "organization": keyword_regex(ORGANIZATION_ALIAS_ORDER),
    "subject": re.compile(_SUBJECT, re.IGNORECASE),
    "position": keyword_regex(keyword for keyword, _ in POSITION_KEYWORDS),
})


def _validate_tables():
    for keyword, position_id in POSITION_KEYWORDS:
        if position_id not in POSITIONS:
            raise ValueError(f"Position keyword '{keyword}' maps to unknown position {position_id}")
    for keyword, committee_id in COMMITTEE_KEYWORDS:
        if committee_id not in COMMITTEES:
            raise ValueError(f"Committee keyword '{keyword}' maps to unknown committee {committee_id}")
    for alias in ORGANIZATION_ALIASES:
        if alias != alias.lower():
            raise ValueError(f"Organization alias must be lowercase: {alias}")


_validate_tables()
