from pydantic import BaseModel, ConfigDict, Field
from typing import List


class GrammarIssue(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: int = Field(ge=0)
    end: int = Field(ge=0)
    message: str
    suggestions: List[str] = Field(default_factory=list)
    severity: str


class TextStats(BaseModel):
    word_count: int = Field(ge=0)
    sentence_count: int = Field(ge=1)
    issue_count: int = Field(ge=0)


class CheckResult(BaseModel):
    issues: List[GrammarIssue]
    stats: TextStats


class CheckRequest(BaseModel):
    text: str
