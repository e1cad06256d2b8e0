from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import List, Protocol

from language_tool_python import LanguageTool

from ghostpen.core import config
from ghostpen.services.spans import InsertAfter, Remove, ReplaceWith, Suggestion, original_span

log = logging.getLogger("linter")

ISSUE_KINDS = {
    "misspelling": "Spelling",
    "typographical": "Typography",
    "grammar": "Grammar",
    "style": "Style",
    "duplication": "Repetition",
    "locale-violation": "Regionalism",
    "whitespace": "Formatting",
}


@dataclass(frozen=True)
class Lint:
    start: int
    end: int
    message: str
    suggestions: List[Suggestion] = field(default_factory=list)
    kind: str = "Miscellaneous"


class Linter(Protocol):
    def lint(self, text: str) -> List[Lint]: ...


# Lazy singleton: starting LanguageTool spins up a JVM
_LT = None
_LT_LOCK = threading.Lock()
def LT():
    global _LT
    if _LT is None:
        with _LT_LOCK:
            if _LT is None:
                log.info("Starting LanguageTool (%s)", config.GHOSTPEN_LANGUAGE)
                _LT = LanguageTool(config.GHOSTPEN_LANGUAGE)
    return _LT


def classify_replacement(original: str, replacement: str) -> Suggestion:
    if replacement == "":
        return Remove()
    if original and len(replacement) > len(original) and replacement.startswith(original):
        return InsertAfter(replacement[len(original):])
    return ReplaceWith(replacement)


def issue_kind(rule_issue_type) -> str:
    key = (rule_issue_type or "").strip().lower()
    if not key:
        return "Miscellaneous"
    return ISSUE_KINDS.get(key, key.replace("-", " ").title())


class LanguageToolLinter:
    """Adapts LanguageTool matches to Lint records with typed suggestions."""

    def __init__(self, tool=None, max_suggestions: int | None = None):
        self._tool = tool
        self.max_suggestions = max_suggestions

    @property
    def tool(self):
        return self._tool if self._tool is not None else LT()

    def lint(self, text: str) -> List[Lint]:
        limit = self.max_suggestions if self.max_suggestions is not None else config.MAX_SUGGESTIONS
        lints: List[Lint] = []
        for m in self.tool.check(text):
            start = m.offset
            end = m.offset + m.errorLength
            flagged = original_span(text, start, end)
            replacements = list(m.replacements or [])[:limit]
            lints.append(Lint(
                start=start,
                end=end,
                message=m.message,
                suggestions=[classify_replacement(flagged, r) for r in replacements],
                kind=issue_kind(getattr(m, "ruleIssueType", None)),
            ))
        return lints
