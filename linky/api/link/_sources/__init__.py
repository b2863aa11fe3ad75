"""Link occurrence sources."""

from collections.abc import Sequence
from typing import TextIO

from ._BaseSource import BaseSource
from .FileSource import FileSource
from .LinkRef import LinkRef
from .LinkSourceError import LinkSourceError
from .md_file_links import md_file_links
from .StreamFormatError import StreamFormatError
from .StreamSource import StreamSource

__all__ = [
    "BaseSource",
    "FileSource",
    "LinkRef",
    "LinkSourceError",
    "StreamFormatError",
    "StreamSource",
    "get_source",
    "md_file_links",
]


def get_source(files: Sequence[str] | None, stream: TextIO) -> BaseSource:
    """Read documents when files are given, otherwise pre-extracted lines from stream."""
    if files:
        return FileSource(files)
    return StreamSource(stream)
