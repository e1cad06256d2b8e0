from __future__ import annotations

import logging
from typing import List, Optional

from ghostpen.models.grammar import CheckResult, GrammarIssue
from ghostpen.services.linter import LanguageToolLinter, Lint, Linter
from ghostpen.services.spans import expand_suggestions, original_span
from ghostpen.services.stats import text_stats

log = logging.getLogger("grammar")


def to_issue(text: str, lint: Lint) -> GrammarIssue:
    # Pre-expand suggestions so every one is a plain replacement for [start, end)
    flagged = original_span(text, lint.start, lint.end)
    return GrammarIssue(
        start=lint.start,
        end=lint.end,
        message=lint.message,
        suggestions=expand_suggestions(lint.suggestions, flagged),
        severity=lint.kind,
    )


def check_text(text: str, linter: Optional[Linter] = None) -> CheckResult:
    """
    Run the linter over `text` and return replacement-ready issues plus
    word/sentence statistics. Reads and writes nothing outside its arguments.
    """
    linter = linter or LanguageToolLinter()
    try:
        lints = linter.lint(text)
    except Exception:
        # checking must always produce a result; report a clean text instead
        log.warning("Linter failed, returning no issues", exc_info=True)
        lints = []
    issues: List[GrammarIssue] = [to_issue(text, lint) for lint in lints]
    log.info("Grammar check: %d chars, %d issues", len(text), len(issues))
    return CheckResult(issues=issues, stats=text_stats(text, issue_count=len(issues)))
