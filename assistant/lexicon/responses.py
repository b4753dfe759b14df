"""
Reply texts for the campus assistant.

Static intents draw from a template pool; directory-backed intents format
one of the lookup messages below. Replies carry the Tagalog gloss in
parentheses the way the portal chat does.
"""

from types import MappingProxyType

from assistant.lexicon.intents import DYNAMIC_INTENTS, IntentName


RESPONSE_TEMPLATES = MappingProxyType({
    IntentName.GREETING: (
        "Hello! How can I help you with UNISYNC today?",
        "Kumusta! Paano kita matutulungan sa UNISYNC?",
        "Hi there! Ask me about announcements, schedules, rooms, or organizations.",
    ),
    IntentName.THANKS: (
        "You're welcome! Is there anything else I can help you with? "
        "(Walang anuman! May iba pa ba akong maitutulong?)",
        "Happy to help! Just ask if you need anything else.",
    ),
    IntentName.GOODBYE: (
        "Goodbye! Come back anytime you need help with UNISYNC. (Paalam!)",
        "See you around campus!",
    ),
    IntentName.HELP: (
        "I can help you with:\n"
        "• Announcements - viewing, creating, filtering posts\n"
        "• Schedule - viewing classes, uploading registration form\n"
        "• Room Finder - finding available rooms\n"
        "• Organizations - officers, committees and membership\n"
        "• Profile - updating your information\n\n"
        "Just ask in English or Tagalog!",
    ),
    IntentName.VIEW_SCHEDULE: (
        "You can view your class schedule in the Schedule page. Navigate to Schedule "
        "from the sidebar menu. Your classes will appear based on your uploaded "
        "registration form.\n\n(Makikita mo ang iyong schedule sa Schedule page.)",
        "The Schedule page shows your class timetable once your registration form "
        "is uploaded.\n\n(Ang Schedule page ay nagpapakita ng iyong mga klase.)",
    ),
    IntentName.UPLOAD_SCHEDULE: (
        "To add your schedule, go to the Schedule page and click \"Add Registration Form\" "
        "to upload your COR (Certificate of Registration) PDF file. The system will "
        "automatically extract your classes.\n\n"
        "(Para idagdag ang schedule mo, pumunta sa Schedule page at i-click ang "
        "\"Add Registration Form\".)",
    ),
    IntentName.FACULTY_SCHEDULE: (
        "Faculty members can claim schedule codes in the Schedule page under the "
        "\"Claim Classes\" tab. Your teaching schedule appears once students upload "
        "their registration forms.\n\n"
        "(Ang mga guro ay pwedeng mag-claim ng schedule codes para makonekta sa mga estudyante.)",
    ),
    IntentName.VIEW_ANNOUNCEMENTS: (
        "Visit the Announcements page to see all campus updates, events, and news from "
        "your department, organizations, and the whole campus.\n\n"
        "(Pumunta sa Announcements page para makita ang mga balita at updates.)",
    ),
    IntentName.CREATE_ANNOUNCEMENT: (
        "To create an announcement, go to the Announcements page and click the "
        "\"Create Announcement\" button. You can add a title, content, images, set the "
        "priority, and target specific audiences. Class Representatives and above can "
        "post announcements.\n\n"
        "(Para gumawa ng announcement, pumunta sa Announcements page at i-click ang "
        "\"Create Announcement\".)",
    ),
    IntentName.FILTER_ANNOUNCEMENTS: (
        "You can filter announcements by organization using the organization logos at "
        "the top. Click any logo to see only their posts.\n\n"
        "(Pwede mong i-filter ang announcements ayon sa organization.)",
    ),
    IntentName.ANNOUNCEMENT_PRIORITY: (
        "Announcements have priority levels: Urgent (red), High (orange), Normal (blue), "
        "and Low (gray). Urgent announcements are pinned at the top.\n\n"
        "(May priority levels ang mga announcement: Urgent, High, Normal, at Low.)",
    ),
    IntentName.FIND_ROOM: (
        "Use the Room Finder to check available rooms and facilities on campus. Go to "
        "Find Room from the sidebar to see availability by building and time.\n\n"
        "(Gamitin ang Room Finder para mahanap ang available na mga silid.)",
    ),
    IntentName.BOOK_ROOM: (
        "Room booking lets you reserve venues for events or activities. Check the Rooms "
        "page for available facilities and booking options.\n\n"
        "(Ang room booking ay nagpapahintulot na mag-reserve ng mga venue.)",
    ),
    IntentName.ORG_INFO: (
        "Student organizations post their updates and events in the Announcements "
        "section. You can filter by organization to see specific group content.\n\n"
        "(Ang mga organization ay nagpo-post ng kanilang updates sa Announcements section.)",
        "Ask me who the officers of an organization are, or which committees it has.",
    ),
    IntentName.ORG_LIST: (
        "CvSU Imus Campus has various organizations: CSG (Student Government), BITS "
        "(IT Society), CSC (Computer Science Clique), BMS (Business Management), CYLE "
        "(Entrepreneurship), EDGE (Education), and many more.\n\n"
        "(Maraming organization sa CvSU Imus: CSG, BITS, CSC, BMS, at iba pa.)",
    ),
    IntentName.JOIN_ORG: (
        "To join an organization, look for their announcements in the Announcements "
        "page and contact them for membership details.\n\n"
        "(Para sumali sa organization, maghanap ng kanilang announcements at makipag-ugnay "
        "para sa membership.)",
    ),
    IntentName.PROFILE: (
        "Your profile contains your personal information, role, department, and "
        "organization memberships. Access it from the sidebar or by clicking your "
        "profile picture.\n\n(Ang iyong profile ay naglalaman ng iyong personal na impormasyon.)",
    ),
    IntentName.EDIT_PROFILE: (
        "You can update your profile by clicking your profile picture in the sidebar "
        "and going to account settings.\n\n"
        "(Pwede mong i-update ang iyong profile sa account settings.)",
    ),
    IntentName.FACULTY_REQUEST: (
        "To request the faculty role, go to the Dashboard and click \"Request Faculty "
        "Role\". Upload your faculty ID for verification and an admin will review your "
        "request.\n\n(Para mag-request ng faculty role, pumunta sa Dashboard.)",
    ),
    IntentName.CLASS_REP: (
        "Class Representatives can create announcements for their section, moderate "
        "comments, and represent their class. To become one, contact your department "
        "head or student affairs.\n\n"
        "(Ang Class Representatives ay pwedeng gumawa ng announcements para sa kanilang section.)",
    ),
    IntentName.MODERATION: (
        "Admins moderate announcements and comments through the Moderation page. "
        "Pending items are reviewed before being published.\n\n"
        "(Ang mga Admin ay pwedeng mag-moderate ng announcements sa Moderation page.)",
    ),
    IntentName.UNKNOWN: (
        "I can help you with announcements, schedules, rooms, organizations, and more! "
        "Try asking:\n"
        "• \"How do I view my schedule?\"\n"
        "• \"Paano gumawa ng announcement?\"\n"
        "• \"Where can I find available rooms?\"\n"
        "• \"Who is the president of CSG?\"\n\n"
        "(Hindi ko maintindihan. Subukan mong magtanong tungkol sa schedules, "
        "announcements, o rooms.)",
    ),
})


FOLLOW_UP_SUGGESTIONS = MappingProxyType({
    IntentName.GREETING: ("View my schedule", "Latest announcements", "Find a room", "Help"),
    IntentName.THANKS: ("View my schedule", "Latest announcements", "Help"),
    IntentName.GOODBYE: ("Help",),
    IntentName.HELP: ("View my schedule", "Create announcement", "Find a room", "List of organizations"),
    IntentName.VIEW_SCHEDULE: ("Upload schedule", "Find a room", "Faculty schedule"),
    IntentName.UPLOAD_SCHEDULE: ("View my schedule", "Help"),
    IntentName.FACULTY_SCHEDULE: ("Request faculty role", "View my schedule"),
    IntentName.VIEW_ANNOUNCEMENTS: ("Create announcement", "Filter announcements", "Announcement priority"),
    IntentName.CREATE_ANNOUNCEMENT: ("Announcement priority", "Class rep", "Moderation"),
    IntentName.FILTER_ANNOUNCEMENTS: ("Latest announcements", "List of organizations"),
    IntentName.ANNOUNCEMENT_PRIORITY: ("Create announcement", "Latest announcements"),
    IntentName.FIND_ROOM: ("Room statistics", "Book a room"),
    IntentName.BOOK_ROOM: ("Find a room", "Room statistics"),
    IntentName.ROOM_STATS: ("Find a room", "Book a room"),
    IntentName.ORG_INFO: ("List of organizations", "Who is the president of CSG?", "Join organization"),
    IntentName.ORG_LIST: ("Who is the president of CSG?", "List of officers of BITS", "Join organization"),
    IntentName.JOIN_ORG: ("List of organizations", "Latest announcements"),
    IntentName.ORG_OFFICER: ("List of officers of CSG", "Publicity committee of CSG", "List of organizations"),
    IntentName.ORG_OFFICER_LIST: ("Who is the president of CSG?", "Publicity committee of CSG"),
    IntentName.ORG_COMMITTEE: ("List of officers of CSG", "List of organizations"),
    IntentName.PROFILE: ("Edit profile", "Request faculty role"),
    IntentName.EDIT_PROFILE: ("My profile", "Help"),
    IntentName.FACULTY_REQUEST: ("Faculty schedule", "My profile"),
    IntentName.CLASS_REP: ("Create announcement", "Moderation"),
    IntentName.MODERATION: ("Create announcement", "Class rep"),
    IntentName.UNKNOWN: ("View my schedule", "Latest announcements", "Find a room", "List of organizations"),
})


MAX_SUGGESTIONS = 4

NEGATIVE_SENTIMENT_PREFIX = "Sorry for the trouble. (Pasensya na.)"

ORGANIZATION_CLARIFY = (
    "Which organization do you mean? I know about: {organizations}."
)
OFFICER_FOUND = "The {position} of {organization} is {name}."
OFFICER_NOT_FOUND = "I could not find the {position} for {organization}."
OFFICER_LIST_FOUND = "Here are the officers of {organization}:\n{officers}"
OFFICER_LIST_NOT_FOUND = "I could not find any officers for {organization}."
COMMITTEE_CLARIFY = "Which committee of {organization} do you mean? Committees: {committees}."
COMMITTEE_FOUND = "Members of the {committee} of {organization}:\n{members}"
COMMITTEE_NOT_FOUND = "I could not find the {committee} for {organization}."
ROOM_STATS_FOUND = (
    "There are {total} rooms on campus: {vacant} vacant and {occupied} occupied."
)
ROOM_STATS_NOT_FOUND = "I could not find room statistics right now."
LOOKUP_FAILED = (
    "Sorry, something went wrong while looking that up. Please try again later."
)


def _validate_responses():
    for intent, suggestions in FOLLOW_UP_SUGGESTIONS.items():
        if len(suggestions) > MAX_SUGGESTIONS:
            raise ValueError(f"Too many suggestions for {intent.value}")
    for intent in DYNAMIC_INTENTS:
        if intent in RESPONSE_TEMPLATES:
            raise ValueError(f"{intent.value} is answered from the directory, not a template pool")
    if IntentName.UNKNOWN not in RESPONSE_TEMPLATES or IntentName.UNKNOWN not in FOLLOW_UP_SUGGESTIONS:
        raise ValueError("UNKNOWN must have a template pool and suggestions")


_validate_responses()
