"""Read a Markdown document and list its links (UNO: single function)."""

from pathlib import Path

from .LinkRef import LinkRef
from .LinkSourceError import LinkSourceError
from ._MarkdownParser import MarkdownParser


def md_file_links(path: str | Path) -> list[LinkRef]:
    """Return the links of a Markdown file, ordered by line and column.

    Raises:
        LinkSourceError: If the file cannot be read or is not valid UTF-8.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LinkSourceError(str(exc)) from exc

    return list(MarkdownParser().parse(text))
