from __future__ import annotations

import re

# Keeps symbols embedded in technical terms: c++, c#, node.js, event-driven.
_NOISE_RE = re.compile(r"[^\w\s+#.\-]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    if not text:
        return ""
    cleaned = _NOISE_RE.sub(" ", text.lower())
    return _WHITESPACE_RE.sub(" ", cleaned).strip()
