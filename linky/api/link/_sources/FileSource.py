"""Link occurrences read from Markdown documents."""

import shlex
from collections.abc import Iterator, Sequence

from linky.utils.logger import get_logger

from ._BaseSource import BaseSource
from .LinkSourceError import LinkSourceError
from .md_file_links import md_file_links

logger = get_logger("source")


class FileSource(BaseSource):
    """Scans each document in the order given.

    A document that cannot be read is logged and skipped; the others are
    still scanned.
    """

    def __init__(self, paths: Sequence[str]):
        self.paths = list(paths)
        self.errors = 0

    def __iter__(self) -> Iterator[tuple[str, int, str]]:
        for path in self.paths:
            try:
                refs = md_file_links(path)
            except LinkSourceError as err:
                self.errors += 1
                logger.error("reading file %s: %s", shlex.quote(path), err)
                continue
            for ref in refs:
                yield path, ref.line_number, ref.raw_target
