"""Anchor ID extractor."""

import html
import re

from .Document import DocumentKind
from .slugify_heading import slugify_heading

ATX_HEADING_PATTERN = re.compile(r"^ {0,3}#{1,6}(?:[ \t]+|$)(.*?)(?:[ \t]+#+)?[ \t]*$")
SETEXT_UNDERLINE_PATTERN = re.compile(r"^ {0,3}(?:=+|-+)[ \t]*$")
HEADING_ID_PATTERN = re.compile(r"[ \t]*\{#([^\s}]+)\}[ \t]*$")
FENCE_PATTERN = re.compile(r"^ {0,3}(```|~~~)")

# Note: This is not a full HTML parser but sufficient for collecting anchors
TAG_PATTERN = re.compile(r"<([a-zA-Z][\w:-]*)(\s[^>]*)?/?>")
ATTR_PATTERN = re.compile(r"""([\w:-]+)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'>]+))""")


def extract_anchors(text: str, kind: DocumentKind) -> frozenset[str]:
    """Collect the addressable anchor IDs of a document.

    Args:
        text: Decoded document content
        kind: "markdown", "html" or "other"

    Returns:
        Set of anchor IDs (empty for documents without anchors)
    """
    if kind == "markdown":
        return frozenset(_markdown_anchors(text))
    if kind == "html":
        return frozenset(_html_anchors(text))
    return frozenset()


def _html_anchors(text: str) -> list[str]:
    ids: list[str] = []
    for tag in TAG_PATTERN.finditer(text):
        name = tag.group(1).lower()
        for attr in ATTR_PATTERN.finditer(tag.group(2) or ""):
            key = attr.group(1).lower()
            value = next(v for v in attr.group(2, 3, 4) if v is not None)
            if key == "id" or (key == "name" and name == "a"):
                ids.append(html.unescape(value))
    return ids


def _markdown_anchors(text: str) -> list[str]:
    ids: list[str] = []
    slug_counts: dict[str, int] = {}

    def add_heading(heading: str) -> None:
        explicit = HEADING_ID_PATTERN.search(heading)
        if explicit:
            ids.append(explicit.group(1))
            return
        slug = slugify_heading(heading)
        seen = slug_counts.get(slug, 0)
        slug_counts[slug] = seen + 1
        ids.append(f"{slug}-{seen}" if seen else slug)

    lines = text.splitlines()
    start = 0
    # YAML front matter is not part of the rendered document
    if lines and lines[0].strip() == "---":
        for i in range(1, len(lines)):
            if lines[i].strip() in ("---", "..."):
                start = i + 1
                break

    fence: str | None = None
    previous = ""
    for line in lines[start:]:
        fence_match = FENCE_PATTERN.match(line)
        if fence is not None:
            if fence_match and fence_match.group(1) == fence:
                fence = None
            previous = ""
            continue
        if fence_match:
            fence = fence_match.group(1)
            previous = ""
            continue

        atx = ATX_HEADING_PATTERN.match(line)
        if atx:
            add_heading(atx.group(1))
            ids.extend(_html_anchors(line))
            previous = ""
            continue

        if SETEXT_UNDERLINE_PATTERN.match(line) and previous.strip():
            add_heading(previous.strip())
            previous = ""
            continue

        ids.extend(_html_anchors(line))
        previous = line

    return ids
