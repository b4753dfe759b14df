"""
Text normalization for intent matching.

Lowercases, strips sentence punctuation, drops filler words and replaces
known misspellings token by token. The output is a fixed point:
normalize(normalize(x)) == normalize(x).
"""

import re
from typing import Optional

from assistant.lexicon.typos import FILLER_WORDS, TYPO_CORRECTIONS

_PUNCTUATION = re.compile(r"[?!.,;:]")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: Optional[str]) -> str:
    """Normalize an utterance for matching against intent patterns."""
    if not text:
        return ""

    text = str(text).lower().strip()
    text = _PUNCTUATION.sub("", text)
    text = _WHITESPACE.sub(" ", text).strip()

    tokens = [
        TYPO_CORRECTIONS.get(token, token)
        for token in text.split(" ")
        if token and token not in FILLER_WORDS
    ]
    return " ".join(tokens)


def lower_trim(text: Optional[str]) -> str:
    """Lowercase and trim without any other rewriting."""
    if not text:
        return ""
    return str(text).lower().strip()
