"""Positive and negative word lists for the lexicon sentiment vote."""

POSITIVE_WORDS = (
    "good",
    "great",
    "thank",
    "thanks",
    "awesome",
    "excellent",
    "love",
    "helpful",
    "nice",
    "perfect",
    "amazing",
    "salamat",
    "galing",
    "ayos",
    "maganda",
)

NEGATIVE_WORDS = (
    "bad",
    "wrong",
    "error",
    "not working",
    "broken",
    "useless",
    "terrible",
    "hate",
    "annoying",
    "confused",
    "frustrated",
    "problem",
    "fail",
    "nakakainis",
    "hindi gumagana",
    "sira",
)
