import logging
import os
from datetime import datetime, timezone

from ghostpen.models.llm import FeedbackRequest
from ghostpen.services import audit
from ghostpen.utils.storage import append_jsonl, home_dir

log = logging.getLogger("feedback")

FEEDBACK_FILE = "feedback.jsonl"


class FeedbackError(RuntimeError):
    ...


def save_feedback(feedback: FeedbackRequest) -> str:
    """Append one rating to <GHOSTPEN_HOME>/feedback.jsonl. No dedup."""
    entry = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "rating": feedback.rating,
        "original_text": feedback.original_text,
        "rewritten_text": feedback.rewritten_text,
        "mode": feedback.mode,
    }
    try:
        path = os.path.join(home_dir(), FEEDBACK_FILE)
        append_jsonl(path, entry)
    except OSError as e:
        raise FeedbackError(f"Failed to write feedback: {e}") from e

    log.info("Feedback saved: rating=%s mode=%s", feedback.rating, feedback.mode)
    audit.record("feedback", {"rating": feedback.rating, "mode": feedback.mode})
    return path
