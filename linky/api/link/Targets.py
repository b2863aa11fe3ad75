"""Targets model (UNO: single model)."""

from dataclasses import dataclass

from .LinkError import LinkError
from .Tag import Tag


@dataclass(frozen=True)
class Targets:
    """The fetched anchor IDs of one link base, or why they could not be fetched."""

    ids: frozenset[str] = frozenset()
    tag: Tag | None = None
    error: LinkError | None = None

    def __post_init__(self):
        if (self.tag is None) != (self.error is None):
            raise ValueError("Targets failure needs both a tag and an error")

    @property
    def is_ok(self) -> bool:
        return self.tag is None

    @classmethod
    def found(cls, ids) -> "Targets":
        return cls(ids=frozenset(ids))

    @classmethod
    def failed(cls, tag: Tag, error: LinkError) -> "Targets":
        return cls(tag=tag, error=error)
