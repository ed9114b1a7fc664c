"""Deterministic offline narration used when the generative rewrite is unavailable."""

import re

AUDIENCE_PREFIXES: dict[str, str] = {
    "Students": "For students, ",
    "Executives": "For executives, ",
    "Technical": "From a technical perspective, ",
    "Layperson": "In simple terms, ",
}

_SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
_MAX_SENTENCES = 2


def fallback_rewrite(text: str, audience: str) -> str:
    """Prefix the first two sentences of ``text`` with the audience phrase.

    Unknown audiences get no prefix. Text with no words, such as "...", becomes
    the prefix followed by a single ".". Pure: equal inputs give equal outputs.
    """
    prefix = AUDIENCE_PREFIXES.get(audience, "")
    fragments = [f.strip() for f in _SENTENCE_BOUNDARY.split(text) if f.strip()]
    if not fragments:
        return prefix + "."
    return prefix + ". ".join(fragments[:_MAX_SENTENCES]) + "."
