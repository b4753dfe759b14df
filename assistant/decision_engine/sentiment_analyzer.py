"""Lexicon-vote sentiment analysis."""

from enum import Enum
from typing import Iterable, Optional

from assistant.lexicon.sentiment import NEGATIVE_WORDS, POSITIVE_WORDS


class Sentiment(Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


def count_hits(text: str, words: Iterable[str]) -> int:
    """Number of lexicon entries that occur as substrings of text."""
    return sum(1 for word in words if word in text)


def sentiment(text: Optional[str]) -> Sentiment:
    """Strict majority of positive or negative hits; ties are neutral."""
    lowered = (text or "").lower()
    positive = count_hits(lowered, POSITIVE_WORDS)
    negative = count_hits(lowered, NEGATIVE_WORDS)

    if positive > negative:
        return Sentiment.POSITIVE
    if negative > positive:
        return Sentiment.NEGATIVE
    return Sentiment.NEUTRAL
