"""
Tests for answer normalization
"""

import pytest

from grammar_quiz.services.normalizer import normalize


class TestNormalize:
    """Test cases for normalize()."""

    def test_folds_case_and_whitespace(self):
        assert normalize("  Had   ALREADY  cooked ") == "had already cooked"

    def test_tabs_and_newlines_collapse_to_single_space(self):
        assert normalize("had\tbeen\n\n  waiting") == "had been waiting"

    def test_none_is_empty(self):
        assert normalize(None) == ""

    def test_whitespace_only_is_empty(self):
        assert normalize(" \t\n ") == ""

    @pytest.mark.parametrize("text", [
        "  Had   ALREADY  cooked ",
        "HADN'T  seen",
        "",
        "had been practising",
    ])
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once

    def test_punctuation_is_kept(self):
        assert normalize("Hadn't  Met") == "hadn't met"
