"""Heading slug generator (UNO: single function)."""

import re

_IMAGE_OR_LINK = re.compile(r"!?\[([^\]]*)\](?:\([^)]*\)|\[[^\]]*\])")
_HTML_TAG = re.compile(r"<[^>]+>")
# Emphasis underscores, but not the ones inside words like snake_case
_EMPHASIS_UNDERSCORE = re.compile(r"(?<!\w)_+|_+(?!\w)")
_NOT_SLUG_CHAR = re.compile(r"[^\w\- ]")


def slugify_heading(text: str) -> str:
    """Turn heading text into the anchor ID GitHub generates for it.

    Inline markup is first reduced to its visible text, then the result is
    lower-cased, stripped of punctuation other than hyphens and underscores,
    and spaces become hyphens. Duplicate handling is left to the caller.
    """
    text = _IMAGE_OR_LINK.sub(r"\1", text)
    text = _HTML_TAG.sub("", text)
    text = text.replace("`", "")
    text = _EMPHASIS_UNDERSCORE.sub("", text)
    text = _NOT_SLUG_CHAR.sub("", text.strip().lower())
    return text.replace(" ", "-")
