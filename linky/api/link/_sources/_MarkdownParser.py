"""Markdown link parser."""

import re
from collections.abc import Iterator

from .LinkRef import LinkRef

FENCE_PATTERN = re.compile(r"^ {0,3}(```|~~~)")
CODE_SPAN_PATTERN = re.compile(r"(`+)(?:(?!\1).)+?\1")
# [label]: destination "optional title"
REFERENCE_DEF_PATTERN = re.compile(r"^ {0,3}\[([^\]^][^\]]*)\]:\s*(<[^>]*>|\S+)(?:\s+.*)?$")
# Link text allows one level of nested brackets, as in [![alt](img)](href)
_TEXT = r"(?:[^\[\]]|\[[^\[\]]*\])*"
_DESTINATION = r"<[^>\n]*>|[^\s()]*(?:\([^\s()]*\)[^\s()]*)*"
_TITLE = r"\"[^\"]*\"|'[^']*'|\([^)]*\)"
INLINE_PATTERN = re.compile(rf"(!)?\[({_TEXT})\]\(\s*({_DESTINATION})(?:\s+(?:{_TITLE}))?\s*\)")
FULL_REFERENCE_PATTERN = re.compile(rf"(!)?\[({_TEXT})\]\[([^\[\]]*)\]")
SHORTCUT_REFERENCE_PATTERN = re.compile(r"(!)?\[([^\[\]]+)\](?![\[(:])")
AUTOLINK_PATTERN = re.compile(r"<([a-zA-Z][a-zA-Z0-9+.-]{1,31}:[^\s<>]*)>")


def _normalize_label(label: str) -> str:
    return " ".join(label.split()).lower()


def _unwrap(destination: str) -> str:
    if destination.startswith("<") and destination.endswith(">"):
        return destination[1:-1]
    return destination


class MarkdownParser:
    """Parser for Markdown link occurrences.

    Recognizes inline links and images, reference-style links resolved to
    their definition, and autolinks. Code blocks and code spans are skipped.
    """

    def parse(self, text: str) -> Iterator[LinkRef]:
        lines = text.splitlines()
        definitions = self._collect_definitions(lines)

        for line_num, line in self._prose_lines(lines):
            if REFERENCE_DEF_PATTERN.match(line):
                continue
            found: list[tuple[int, str]] = []
            self._scan(CODE_SPAN_PATTERN.sub(lambda m: " " * len(m.group(0)), line), 0, definitions, found)
            for column, target in sorted(found, key=lambda item: item[0]):
                yield LinkRef(line_number=line_num, column_number=column + 1, raw_target=target)

    def _collect_definitions(self, lines: list[str]) -> dict[str, str]:
        definitions: dict[str, str] = {}
        for _, line in self._prose_lines(lines):
            match = REFERENCE_DEF_PATTERN.match(line)
            if match:
                # First definition wins
                definitions.setdefault(_normalize_label(match.group(1)), _unwrap(match.group(2)))
        return definitions

    def _prose_lines(self, lines: list[str]) -> Iterator[tuple[int, str]]:
        fence: str | None = None
        for line_num, line in enumerate(lines, start=1):
            match = FENCE_PATTERN.match(line)
            if fence is not None:
                if match and match.group(1) == fence:
                    fence = None
                continue
            if match:
                fence = match.group(1)
                continue
            yield line_num, line

    def _scan(self, line: str, offset: int, definitions: dict[str, str], found: list[tuple[int, str]]) -> None:
        masked = line

        def mask(match: re.Match) -> None:
            nonlocal masked
            start, end = match.span()
            masked = masked[:start] + " " * (end - start) + masked[end:]

        # 1. Inline: [text](destination "title")
        for match in INLINE_PATTERN.finditer(line):
            found.append((offset + match.start(), _unwrap(match.group(3))))
            self._scan(match.group(2), offset + match.start(2), definitions, found)
            mask(match)

        # 2. Full and collapsed references: [text][label], [label][]
        for match in FULL_REFERENCE_PATTERN.finditer(masked):
            label = match.group(3) or match.group(2)
            target = definitions.get(_normalize_label(label))
            if target is not None:
                found.append((offset + match.start(), target))
                self._scan(match.group(2), offset + match.start(2), definitions, found)
                mask(match)

        # 3. Shortcut references: [label]
        for match in SHORTCUT_REFERENCE_PATTERN.finditer(masked):
            target = definitions.get(_normalize_label(match.group(2)))
            if target is not None:
                found.append((offset + match.start(), target))
                mask(match)

        # 4. Autolinks: <scheme:...>
        for match in AUTOLINK_PATTERN.finditer(masked):
            found.append((offset + match.start(), match.group(1)))
