from ghostpen.models.llm import RewriteMode

# ResponseParser splits on this token first
EXPLANATION_DELIMITER = "EXPLANATION:"

SYSTEM = (
    "You are a writing assistant. You help improve text while preserving the writer's voice. "
    "Always explain WHY you made changes so the writer learns. Be concise."
)

_TEMPLATES = {
    RewriteMode.CLARITY: (
        "Rewrite this text for maximum clarity. Keep the meaning identical.\n\n"
        "First, provide the rewritten text. Then write {delim} followed by what you changed "
        "and why the writer should care (teach them).\n\n"
        "Text: {text}"
    ),
    RewriteMode.CONCISE: (
        "Make this text more concise. Cut unnecessary words without losing meaning.\n\n"
        "First, provide the rewritten text. Then write {delim} followed by what you cut "
        "and why it was unnecessary (teach the writer to self-edit).\n\n"
        "Text: {text}"
    ),
    RewriteMode.FORMAL: (
        "Rewrite in a more formal, professional tone.\n\n"
        "First, provide the rewritten text. Then write {delim} followed by the tone shifts "
        "you made and when a formal tone matters.\n\n"
        "Text: {text}"
    ),
    RewriteMode.CASUAL: (
        "Rewrite in a more casual, conversational tone.\n\n"
        "First, provide the rewritten text. Then write {delim} followed by what you changed "
        "to make it sound more natural.\n\n"
        "Text: {text}"
    ),
    RewriteMode.EXPLAIN: (
        "Act as a writing coach. Identify grammar issues, unclear phrasing and style problems "
        "in this text.\n\n"
        "First, provide a corrected version of the text. Then write {delim} followed by each "
        "issue: WHAT is wrong and WHY it matters. Teach the writer, don't just flag.\n\n"
        "Text: {text}"
    ),
}

_FALLBACK = (
    "Improve this text for clarity and correctness.\n\n"
    "First, provide the improved text. Then write {delim} followed by a brief teaching note.\n\n"
    "Text: {text}"
)


def build_prompt(text: str, mode) -> str:
    """User prompt for `mode`; unknown modes get the generic template."""
    template = _TEMPLATES.get(RewriteMode.parse(mode), _FALLBACK)
    # substitute the delimiter first so braces in the user's text are left alone
    return template.replace("{delim}", EXPLANATION_DELIMITER).replace("{text}", text)


def build_messages(text: str, mode) -> list:
    return [
        {"role": "system", "content": SYSTEM},
        {"role": "user", "content": build_prompt(text, mode)},
    ]
