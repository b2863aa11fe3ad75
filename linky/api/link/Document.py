"""Document model (UNO: single model)."""

from dataclasses import dataclass
from typing import Literal

DocumentKind = Literal["markdown", "html", "other"]


@dataclass(frozen=True)
class Document:
    """Raw content retrieved for a link base."""

    content: bytes
    kind: DocumentKind = "other"
    encoding: str = "utf-8"
