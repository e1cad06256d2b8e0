from enum import Enum
from typing import Literal

from pydantic import BaseModel


class RewriteMode(str, Enum):
    """Named rewrite intent. Any tag we don't recognise maps to OTHER."""

    CLARITY = "clarity"
    CONCISE = "concise"
    FORMAL = "formal"
    CASUAL = "casual"
    EXPLAIN = "explain"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value):
        return cls.OTHER

    @classmethod
    def parse(cls, tag) -> "RewriteMode":
        if isinstance(tag, cls):
            return tag
        # exact match; "Formal" or " formal" fall back like any unknown tag
        return cls(str(tag))


class RewriteRequest(BaseModel):
    text: str
    # open tag on the wire; RewriteMode.parse() decides the template
    mode: str = "clarity"


class RewriteResult(BaseModel):
    rewritten: str
    explanation: str = ""


class LlmStatus(BaseModel):
    available: bool
    provider: str
    model: str


class FeedbackRequest(BaseModel):
    rating: Literal["good", "bad"]
    original_text: str
    rewritten_text: str
    mode: str
