"""Link occurrences read from pre-extracted lines."""

import re
from collections.abc import Iterator
from typing import TextIO

from ._BaseSource import BaseSource
from .StreamFormatError import StreamFormatError

# path:line: <discarded token> link
LINE_PATTERN = re.compile(r"^(.*):(\d+): [^ ]* ([^ ]*)$")


class StreamSource(BaseSource):
    """Parses ``<path>:<line>: <token> <link>`` lines.

    Any line that does not match is fatal: StreamFormatError is raised.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream

    def __iter__(self) -> Iterator[tuple[str, int, str]]:
        for line_num, line in enumerate(self.stream, start=1):
            line = line.rstrip("\r\n")
            match = LINE_PATTERN.match(line)
            if not match:
                raise StreamFormatError(line_num, line)
            yield match.group(1), int(match.group(2)), match.group(3)
