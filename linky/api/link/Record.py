"""Record model (UNO: single model)."""

from dataclasses import dataclass

from .LinkError import LinkError
from .Tag import Tag


@dataclass(frozen=True)
class Record:
    """Outcome for one link occurrence, ready to be reported."""

    path: str
    line_number: int
    raw: str
    tag: Tag | None = None
    error: LinkError | None = None

    def report_line(self) -> str:
        tag = str(self.tag) if self.tag is not None else ""
        return f"{self.path}:{self.line_number}: {tag} {self.raw}"
