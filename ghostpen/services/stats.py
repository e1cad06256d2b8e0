from ghostpen.models.grammar import TextStats

SENTENCE_TERMINATORS = frozenset(".!?")


def word_count(text: str) -> int:
    return len(text.split())


def sentence_count(text: str) -> int:
    # floored at 1 so consumers can divide by it
    return max(1, sum(1 for c in text if c in SENTENCE_TERMINATORS))


def text_stats(text: str, issue_count: int = 0) -> TextStats:
    return TextStats(
        word_count=word_count(text),
        sentence_count=sentence_count(text),
        issue_count=issue_count,
    )
