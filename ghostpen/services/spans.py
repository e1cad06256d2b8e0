# ghostpen/services/spans.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Union


@dataclass(frozen=True)
class ReplaceWith:
    text: str


@dataclass(frozen=True)
class InsertAfter:
    text: str


@dataclass(frozen=True)
class Remove:
    pass


Suggestion = Union[ReplaceWith, InsertAfter, Remove]


def original_span(text: str, start: int, end: int) -> str:
    """
    Flagged substring for [start, end), or "" when the span falls outside
    the text (offsets can go stale if the text was edited or re-encoded).
    """
    if start < 0 or start > end or end > len(text):
        return ""
    return text[start:end]


def expand_suggestion(suggestion: Suggestion, original: str) -> str:
    if isinstance(suggestion, ReplaceWith):
        return suggestion.text
    if isinstance(suggestion, InsertAfter):
        # insertion only makes sense together with what it follows
        return original + suggestion.text
    if isinstance(suggestion, Remove):
        return ""
    raise TypeError(f"Unknown suggestion variant: {suggestion!r}")


def expand_suggestions(suggestions: Sequence[Suggestion], original: str) -> List[str]:
    """One literal replacement string per suggestion, in order."""
    return [expand_suggestion(s, original) for s in suggestions]
