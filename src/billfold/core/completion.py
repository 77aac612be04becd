#!/usr/bin/env python3
"""
Prefix Autocompletion

Pure matching helpers plus a prompt_toolkit Completer built on them.
Matching is case-insensitive; suggestions keep the candidates' original case
and order.
"""

from collections.abc import Iterable, Sequence

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document


def get_matches(candidates: Sequence[str], prefix: str) -> list[str]:
    """
    Return the candidates whose lowercase form starts with the lowercase prefix.

    Example:
        get_matches(["Acme Co.", "Acme Foods", "Beta LLC"], "ac")
        -> ["Acme Co.", "Acme Foods"]
    """
    lowered = prefix.lower()
    return [candidate for candidate in candidates if candidate.lower().startswith(lowered)]


def common_prefix(strings: Sequence[str]) -> str:
    """Longest prefix shared by every string (empty for no strings)."""
    if not strings:
        return ""

    prefix_chars = []
    for chars in zip(*strings):
        first = chars[0]
        if any(c != first for c in chars[1:]):
            break
        prefix_chars.append(first)

    return "".join(prefix_chars)


def suggest_completion(candidates: Sequence[str], prefix: str) -> str | None:
    """
    Suggest what the typed prefix should be completed to.

    Returns:
        The single match when exactly one candidate matches, the matches'
        common prefix when several match, or None when nothing matches
    """
    matches = get_matches(candidates, prefix)
    if not matches:
        return None
    if len(matches) == 1:
        return matches[0]
    return common_prefix(matches)


class PrefixCompleter(Completer):
    """
    prompt_toolkit completer for the whole input.

    The suggested completion (common prefix of several matches) comes first
    when it extends or re-cases the typed text; every full match follows.
    """

    def __init__(self, candidates: Iterable[str]):
        self.candidates = list(candidates)

    def get_completions(self, document: Document, complete_event):
        text = document.text_before_cursor
        matches = get_matches(self.candidates, text)
        suggestion = suggest_completion(self.candidates, text)
        if suggestion and suggestion != text and suggestion not in matches:
            yield Completion(suggestion, start_position=-len(text))
        for match in matches:
            yield Completion(match, start_position=-len(text))
