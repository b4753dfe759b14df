"""Tests for text normalization."""

import pytest

from assistant.decision_engine import normalize


class TestNormalize:
    """Test the normalizer."""

    def test_lowercases_and_strips_punctuation(self):
        """Test case folding and sentence punctuation removal."""
        assert normalize("Where is my Schedule?") == "where is my schedule"

    def test_collapses_whitespace(self):
        """Test runs of whitespace become one space."""
        assert normalize("  hello    there \t ") == "hello there"

    def test_removes_fillers(self):
        """Test politeness markers are dropped."""
        assert normalize("pls po help naman") == "help"

    def test_filler_removal_respects_word_boundaries(self):
        """Fillers inside other words are kept."""
        assert normalize("basketball pokemon") == "basketball pokemon"

    def test_corrects_typos(self):
        """Test misspellings are replaced token by token."""
        assert normalize("shcedule ko pls") == "schedule ko"
        assert normalize("org oficers") == "organization officers"

    def test_corrects_typos_after_punctuation(self):
        """Test typos followed by punctuation are still corrected."""
        assert normalize("tmrw, room 204.") == "tomorrow room 204"

    @pytest.mark.parametrize("text", [None, "", "   ", "pls", "?!"])
    def test_empty_results(self, text):
        """Test degenerate input normalizes to an empty string."""
        assert normalize(text) == ""

    @pytest.mark.parametrize("text", [
        "Shcedule ko PLS!!",
        "  who is the   presidnet of CSC? ",
        "org org orgs",
        "thx po, tmrw na lang",
        "Magandang umaga po!",
        "room 204, NB-101; CompLab 2",
    ])
    def test_idempotent(self, text):
        """Test re-normalizing yields the same string."""
        once = normalize(text)
        assert normalize(once) == once
