"""
Typo-correction and filler-word tables used by the text normalizer.
Covers common English misspellings and Tagalog spellings of campus terms.
"""

from types import MappingProxyType


# Misspelled or colloquial token -> canonical token.
# Canonical values are never keys themselves and never filler words.
TYPO_CORRECTIONS = MappingProxyType({
    # Schedule
    "shcedule": "schedule",
    "schedul": "schedule",
    "schedle": "schedule",
    "scheudle": "schedule",
    "shedule": "schedule",
    "sked": "schedule",
    "iskedyul": "schedule",
    "skedyul": "schedule",
    "clas": "class",
    "klase": "class",
    "subjct": "subject",

    # Announcements
    "anouncement": "announcement",
    "annoucement": "announcement",
    "announcment": "announcement",
    "anunsyo": "announcement",
    "anouncements": "announcements",
    "annoucements": "announcements",
    "announcments": "announcements",

    # Rooms
    "kwarto": "room",
    "silid": "room",
    "availble": "available",
    "avaliable": "available",
    "avilable": "available",
    "bakante": "vacant",
    "vacnt": "vacant",
    "vaccant": "vacant",
    "libre": "free",

    # Organizations
    "org": "organization",
    "orgs": "organizations",
    "organisation": "organization",
    "organisations": "organizations",
    "organizaton": "organization",
    "orgnization": "organization",
    "oragnization": "organization",
    "organisasyon": "organization",
    "organizasyon": "organization",
    "oficer": "officer",
    "offcer": "officer",
    "opisyal": "officer",
    "oficers": "officers",
    "presidnet": "president",
    "presedent": "president",
    "presient": "president",
    "prez": "president",
    "secretery": "secretary",
    "secetary": "secretary",
    "sekretarya": "secretary",
    "tresurer": "treasurer",
    "treasurrer": "treasurer",
    "commitee": "committee",
    "comittee": "committee",
    "committe": "committee",
    "komite": "committee",
    "memeber": "member",

    # Faculty and profile
    "proffesor": "professor",
    "profesor": "professor",
    "faculy": "faculty",
    "facutly": "faculty",
    "profle": "profile",
    "proflie": "profile",
    "uplaod": "upload",
    "uplod": "upload",
    "regsiter": "register",
    "registraion": "registration",

    # Small talk
    "thx": "thanks",
    "tnx": "thanks",
    "thnks": "thanks",
    "helo": "hello",
    "hellow": "hello",
    "hlep": "help",
    "halp": "help",
    "tulong": "help",
    "wat": "what",
    "wht": "what",

    # Days
    "tday": "today",
    "tomorow": "tomorrow",
    "tommorow": "tomorrow",
    "tmrw": "tomorrow",
    "tmr": "tomorrow",
})


# Politeness markers and hesitations that carry no intent.
FILLER_WORDS = frozenset({
    "pls",
    "plz",
    "please",
    "po",
    "naman",
    "lang",
    "ba",
    "nga",
    "um",
    "uh",
    "uhm",
    "hmm",
    "eh",
})
