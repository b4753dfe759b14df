"""
Intent pattern table for the campus assistant.

Each intent lists the phrases it is recognised by and a weight that scales
every matching signal. Patterns are lowercase, punctuation free and already
normalized, so an utterance that equals a pattern matches it exactly.
Table order matters: when two intents score the same, the earlier one wins.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Tuple


class IntentName(Enum):
    """Intents the assistant can recognise."""
    GREETING = "greeting"
    THANKS = "thanks"
    GOODBYE = "goodbye"
    HELP = "help"
    VIEW_SCHEDULE = "view_schedule"
    UPLOAD_SCHEDULE = "upload_schedule"
    FACULTY_SCHEDULE = "faculty_schedule"
    VIEW_ANNOUNCEMENTS = "view_announcements"
    CREATE_ANNOUNCEMENT = "create_announcement"
    FILTER_ANNOUNCEMENTS = "filter_announcements"
    ANNOUNCEMENT_PRIORITY = "announcement_priority"
    FIND_ROOM = "find_room"
    BOOK_ROOM = "book_room"
    ROOM_STATS = "room_stats"
    ORG_INFO = "org_info"
    ORG_LIST = "org_list"
    JOIN_ORG = "join_org"
    ORG_OFFICER = "org_officer"
    ORG_OFFICER_LIST = "org_officer_list"
    ORG_COMMITTEE = "org_committee"
    PROFILE = "profile"
    EDIT_PROFILE = "edit_profile"
    FACULTY_REQUEST = "faculty_request"
    CLASS_REP = "class_rep"
    MODERATION = "moderation"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class IntentDefinition:
    """Phrases and weight for a single intent."""
    name: IntentName
    patterns: Tuple[str, ...]
    weight: float = 1.0

    def __post_init__(self):
        if not self.patterns:
            raise ValueError(f"Intent {self.name.value} has no patterns")
        if self.weight <= 0:
            raise ValueError(f"Intent {self.name.value} must have a positive weight")


INTENT_DEFINITIONS: Tuple[IntentDefinition, ...] = (
    IntentDefinition(
        IntentName.GREETING,
        (
            "hello",
            "hello there",
            "hey",
            "hi there",
            "good morning",
            "good afternoon",
            "good evening",
            "kumusta",
            "kamusta",
            "magandang umaga",
            "magandang hapon",
            "magandang gabi",
        ),
        weight=0.9,
    ),
    IntentDefinition(
        IntentName.THANKS,
        (
            "thanks",
            "thank you",
            "thank you so much",
            "thanks a lot",
            "salamat",
            "maraming salamat",
        ),
        weight=0.9,
    ),
    IntentDefinition(
        IntentName.GOODBYE,
        (
            "goodbye",
            "bye",
            "see you later",
            "paalam",
            "that is all",
        ),
        weight=0.8,
    ),
    IntentDefinition(
        IntentName.HELP,
        (
            "help",
            "i need help",
            "what can you do",
            "how can you help me",
            "ano ang kaya mong gawin",
            "paano ka makakatulong",
        ),
        weight=0.8,
    ),
    IntentDefinition(
        IntentName.VIEW_SCHEDULE,
        (
            "schedule",
            "schedule ko",
            "my schedule",
            "view my schedule",
            "show my schedule",
            "class schedule",
            "where is my schedule",
            "check my class schedule",
            "what are my classes",
            "nasaan ang schedule ko",
            "timetable",
        ),
        weight=1.0,
    ),
    IntentDefinition(
        IntentName.UPLOAD_SCHEDULE,
        (
            "upload schedule",
            "upload my schedule",
            "add my schedule",
            "how to add my schedule",
            "upload registration form",
            "add registration form",
            "upload my cor",
            "paano mag upload ng schedule",
        ),
        weight=0.95,
    ),
    IntentDefinition(
        IntentName.FACULTY_SCHEDULE,
        (
            "claim classes",
            "claim schedule codes",
            "teaching schedule",
            "faculty schedule",
            "my teaching load",
            "how do professors see their classes",
        ),
        weight=0.9,
    ),
    IntentDefinition(
        IntentName.VIEW_ANNOUNCEMENTS,
        (
            "announcements",
            "latest announcements",
            "show announcements",
            "campus news",
            "any updates",
            "what is new on campus",
            "ano ang balita",
        ),
        weight=0.9,
    ),
    IntentDefinition(
        IntentName.CREATE_ANNOUNCEMENT,
        (
            "create announcement",
            "post an announcement",
            "make an announcement",
            "write a new announcement",
            "how to post announcement",
            "paano gumawa ng announcement",
        ),
        weight=0.95,
    ),
    IntentDefinition(
        IntentName.FILTER_ANNOUNCEMENTS,
        (
            "filter announcements",
            "search announcements",
            "filter posts",
            "announcements from my department",
        ),
        weight=0.85,
    ),
    IntentDefinition(
        IntentName.ANNOUNCEMENT_PRIORITY,
        (
            "announcement priority",
            "urgent announcements",
            "important announcements",
            "priority levels",
        ),
        weight=0.85,
    ),
    IntentDefinition(
        IntentName.FIND_ROOM,
        (
            "room",
            "find room",
            "find a room",
            "room finder",
            "vacant rooms",
            "available rooms",
            "free room",
            "where is the room",
            "is there a vacant room",
            "saan may vacant na room",
        ),
        weight=0.95,
    ),
    IntentDefinition(
        IntentName.BOOK_ROOM,
        (
            "book a room",
            "reserve a room",
            "room reservation",
            "room booking",
            "reserve venue",
        ),
        weight=0.9,
    ),
    IntentDefinition(
        IntentName.ROOM_STATS,
        (
            "room statistics",
            "room status",
            "room count",
            "how many rooms",
            "how many rooms are vacant",
            "how many rooms are occupied",
            "ilan ang vacant na room",
        ),
        weight=0.95,
    ),
    IntentDefinition(
        IntentName.ORG_INFO,
        (
            "organization",
            "student organizations",
            "campus organizations",
            "about the organization",
            "what is the organization",
        ),
        weight=0.8,
    ),
    IntentDefinition(
        IntentName.ORG_LIST,
        (
            "list of organizations",
            "all organizations",
            "available organizations",
            "what organizations are there",
            "anong mga organization",
        ),
        weight=0.85,
    ),
    IntentDefinition(
        IntentName.JOIN_ORG,
        (
            "join organization",
            "how to join an organization",
            "become a member",
            "membership",
            "apply for membership",
            "paano sumali",
        ),
        weight=0.9,
    ),
    IntentDefinition(
        IntentName.ORG_OFFICER,
        (
            "officer",
            "organization officer",
            "who is the president",
            "who is the secretary",
            "who is the treasurer",
            "sino ang president",
        ),
        weight=1.0,
    ),
    IntentDefinition(
        IntentName.ORG_OFFICER_LIST,
        (
            "list of officers",
            "all officers",
            "officers list",
            "show officers",
            "who are the officers",
            "mga officer",
        ),
        weight=0.95,
    ),
    IntentDefinition(
        IntentName.ORG_COMMITTEE,
        (
            "committee",
            "committee members",
            "members of the committee",
            "list committee members",
            "who is in the committee",
            "publicity committee",
        ),
        weight=0.95,
    ),
    IntentDefinition(
        IntentName.PROFILE,
        (
            "profile",
            "my profile",
            "my account",
            "account settings",
            "personal information",
        ),
        weight=0.8,
    ),
    IntentDefinition(
        IntentName.EDIT_PROFILE,
        (
            "edit profile",
            "update my profile",
            "edit my account",
            "change my name",
            "change profile picture",
        ),
        weight=0.85,
    ),
    IntentDefinition(
        IntentName.FACULTY_REQUEST,
        (
            "request faculty role",
            "become faculty",
            "faculty verification",
            "how to become a faculty member",
        ),
        weight=0.85,
    ),
    IntentDefinition(
        IntentName.CLASS_REP,
        (
            "class rep",
            "class representative",
            "become class rep",
            "what does a class rep do",
        ),
        weight=0.85,
    ),
    IntentDefinition(
        IntentName.MODERATION,
        (
            "moderation",
            "pending review",
            "content review",
            "moderate comments",
            "why is my post pending",
        ),
        weight=0.8,
    ),
)


# Intents answered from the campus directory instead of a template pool
DYNAMIC_INTENTS = frozenset({
    IntentName.ORG_OFFICER,
    IntentName.ORG_OFFICER_LIST,
    IntentName.ORG_COMMITTEE,
    IntentName.ROOM_STATS,
})


INTENT_DESCRIPTIONS = MappingProxyType({
    IntentName.GREETING: "User greets the assistant",
    IntentName.THANKS: "User thanks the assistant",
    IntentName.GOODBYE: "User ends the conversation",
    IntentName.HELP: "User asks what the assistant can do",
    IntentName.VIEW_SCHEDULE: "User wants to see their class schedule",
    IntentName.UPLOAD_SCHEDULE: "User wants to upload a registration form",
    IntentName.FACULTY_SCHEDULE: "Faculty member asks about teaching schedules",
    IntentName.VIEW_ANNOUNCEMENTS: "User wants to read campus announcements",
    IntentName.CREATE_ANNOUNCEMENT: "User wants to post an announcement",
    IntentName.FILTER_ANNOUNCEMENTS: "User wants to filter announcements",
    IntentName.ANNOUNCEMENT_PRIORITY: "User asks about announcement priority levels",
    IntentName.FIND_ROOM: "User looks for an available room",
    IntentName.BOOK_ROOM: "User wants to reserve a room",
    IntentName.ROOM_STATS: "User asks how many rooms are vacant or occupied",
    IntentName.ORG_INFO: "User asks about student organizations",
    IntentName.ORG_LIST: "User wants the list of organizations",
    IntentName.JOIN_ORG: "User wants to join an organization",
    IntentName.ORG_OFFICER: "User asks who holds an officer position",
    IntentName.ORG_OFFICER_LIST: "User wants all officers of an organization",
    IntentName.ORG_COMMITTEE: "User asks about committee members",
    IntentName.PROFILE: "User asks about their profile",
    IntentName.EDIT_PROFILE: "User wants to update their profile",
    IntentName.FACULTY_REQUEST: "User wants to request the faculty role",
    IntentName.CLASS_REP: "User asks about class representatives",
    IntentName.MODERATION: "User asks about content moderation",
    IntentName.UNKNOWN: "Intent could not be determined",
})


def _validate_definitions(definitions: Tuple[IntentDefinition, ...]):
    """Reject duplicate intents and patterns shared between intents."""
    seen_names = set()
    seen_patterns = {}
    for definition in definitions:
        if definition.name in seen_names:
            raise ValueError(f"Duplicate intent definition: {definition.name.value}")
        if definition.name is IntentName.UNKNOWN:
            raise ValueError("UNKNOWN is a fallback label and cannot have patterns")
        seen_names.add(definition.name)
        for pattern in definition.patterns:
            owner = seen_patterns.setdefault(pattern, definition.name)
            if owner is not definition.name:
                raise ValueError(
                    f"Pattern '{pattern}' is registered for both "
                    f"{owner.value} and {definition.name.value}"
                )


_validate_definitions(INTENT_DEFINITIONS)
