from __future__ import annotations

from typing import Optional, Tuple

from ghostpen.services.prompts import EXPLANATION_DELIMITER

# Models don't always follow the requested format, so accept a few spellings.
# Priority order only breaks ties at the same position; the earliest match in
# the text decides the split.
DELIMITERS = (
    EXPLANATION_DELIMITER,
    "**Explanation:**",
    "**Why:**",
    "---",
    "\n\n**Changes",
)

REWRITE_LABELS = ("REWRITE:", "**Rewrite:**")


def _strip_label(text: str) -> str:
    text = text.strip()
    for label in REWRITE_LABELS:
        if text.startswith(label):
            return text[len(label):].strip()
    return text


def find_delimiter(text: str) -> Optional[Tuple[int, str]]:
    """(position, delimiter) of the earliest delimiter in `text`, or None."""
    best: Optional[Tuple[int, str]] = None
    for delim in DELIMITERS:
        idx = text.find(delim)
        if idx != -1 and (best is None or idx < best[0]):
            best = (idx, delim)
    return best


def parse_response(full: str) -> Tuple[str, str]:
    """
    Split a raw completion into (rewritten, explanation).

    Without a delimiter the whole completion is the rewrite and the
    explanation is empty.
    """
    found = find_delimiter(full)
    if found is None:
        return _strip_label(full), ""
    idx, delim = found
    return _strip_label(full[:idx]), full[idx + len(delim):].strip()
