#!/usr/bin/env python3
"""Tests for prefix autocompletion."""

import pytest
from prompt_toolkit.document import Document

from billfold.core.completion import PrefixCompleter, common_prefix, get_matches, suggest_completion

CANDIDATES = ["Acme Co.", "Acme Foods", "Beta LLC"]


class TestMatching:
    """Test case-insensitive prefix matching."""

    def test_matches_preserve_case_and_order(self):
        assert get_matches(CANDIDATES, "ac") == ["Acme Co.", "Acme Foods"]

    def test_single_match(self):
        assert get_matches(CANDIDATES, "acme c") == ["Acme Co."]

    def test_no_match(self):
        assert get_matches(CANDIDATES, "z") == []

    def test_empty_prefix_matches_everything(self):
        assert get_matches(CANDIDATES, "") == CANDIDATES

    @pytest.mark.parametrize("prefix", ["", "a", "AC", "acme ", "b", "beta llc", "x"])
    def test_match_set_property(self, prefix):
        """Match set is exactly the candidates starting with the prefix, ignoring case."""
        expected = [c for c in CANDIDATES if c.lower().startswith(prefix.lower())]
        assert get_matches(CANDIDATES, prefix) == expected


class TestCommonPrefix:
    """Test longest common prefix."""

    @pytest.mark.parametrize(
        "strings,expected",
        [
            (["Acme Co.", "Acme Foods"], "Acme "),
            (["yellow", "red", "blue"], ""),
            (["abc"], "abc"),
            ([], ""),
            (["abc", "abd", "xbc"], ""),
            (["abcd", "ab"], "ab"),
        ],
    )
    def test_common_prefix(self, strings, expected):
        """Stops at the first position where the strings diverge."""
        assert common_prefix(strings) == expected


class TestSuggestCompletion:
    """Test suggested completions."""

    def test_several_matches_suggest_common_prefix(self):
        assert suggest_completion(CANDIDATES, "ac") == "Acme "

    def test_single_match_suggests_full_candidate(self):
        assert suggest_completion(CANDIDATES, "acme c") == "Acme Co."

    def test_no_match_suggests_nothing(self):
        assert suggest_completion(CANDIDATES, "z") is None


class TestPrefixCompleter:
    """Test the prompt_toolkit completer."""

    def test_completions_replace_whole_input(self):
        completer = PrefixCompleter(CANDIDATES)
        completions = list(completer.get_completions(Document("ac"), None))

        assert [c.text for c in completions] == ["Acme ", "Acme Co.", "Acme Foods"]
        assert all(c.start_position == -2 for c in completions)

    def test_single_match_is_offered_once(self):
        completer = PrefixCompleter(CANDIDATES)
        completions = list(completer.get_completions(Document("acme c"), None))

        assert [c.text for c in completions] == ["Acme Co."]

    def test_no_suggestion_when_prefix_already_typed(self):
        completer = PrefixCompleter(CANDIDATES)
        completions = list(completer.get_completions(Document("Acme "), None))

        assert [c.text for c in completions] == ["Acme Co.", "Acme Foods"]

    def test_no_completions_without_match(self):
        completer = PrefixCompleter(CANDIDATES)

        assert list(completer.get_completions(Document("z"), None)) == []
