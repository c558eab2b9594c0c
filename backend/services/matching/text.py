"""Text canonicalization shared by every lexical signal in the engine."""

import re

# Keep word chars, whitespace and the symbols that make up tokens such as
# "c++", "c#", "node.js" and "ci-cd".
_STRIP_RE = re.compile(r"[^\w\s.+#-]")
_SPACE_RE = re.compile(r"\s+")


def normalize(text: str | None) -> str:
    """Lower-case, drop punctuation (except . + # -) and collapse whitespace."""
    if not text:
        return ""
    lowered = _STRIP_RE.sub(" ", str(text).lower())
    return _SPACE_RE.sub(" ", lowered).strip()


def tokenize(text: str | None) -> list[str]:
    """Normalize then split on spaces, discarding single-character tokens."""
    normalized = normalize(text)
    if not normalized:
        return []
    return [token for token in normalized.split(" ") if len(token) > 1]
