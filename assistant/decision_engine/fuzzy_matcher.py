"""
Edit-distance helpers used by the intent scorer.
"""

from rapidfuzz.distance import Levenshtein


def distance(a: str, b: str) -> int:
    """Unit-cost Levenshtein distance between two strings."""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """1 - distance / longer length; two empty strings are identical."""
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - distance(a, b) / longest


def fuzzy_contains(text: str, target: str, threshold: float) -> bool:
    """
    True when target appears literally in text, or when any whitespace token
    of text is at least `threshold` similar to target. Case-insensitive.
    """
    text = text.lower()
    target = target.lower()

    if target in text:
        return True

    return any(similarity(token, target) >= threshold for token in text.split())
