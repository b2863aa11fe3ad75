"""Abstract producer of link occurrences."""

from abc import ABC, abstractmethod
from collections.abc import Iterator


class BaseSource(ABC):
    """Yields ``(path, line_number, raw_link)`` triples in report order."""

    errors: int = 0

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[str, int, str]]:
        pass
