"""Link value object."""

import os.path
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import unquote, urlsplit, urlunsplit

from .LinkParseError import LinkParseError

_REMOTE_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class Link:
    """A parsed link reference.

    ``base`` is either a normalized local path or an absolute http(s) URI and
    never contains a fragment. Local paths are percent-decoded, so a file name
    written as ``%23`` keeps a literal ``#`` in ``base``. ``fragment`` is None
    when the raw link had no ``#``, and the empty string when it ended with one.
    """

    base: str
    fragment: str | None = None

    def __post_init__(self):
        if self.is_remote and "#" in self.base:
            raise ValueError(f"Link base must not contain a fragment: {self.base}")

    def __str__(self):
        if self.fragment is None:
            return self.base
        return f"{self.base}#{self.fragment}"

    @property
    def is_remote(self) -> bool:
        """Return True if the base is a network URI."""
        return self.base.startswith(("http://", "https://"))

    def split_fragment(self) -> tuple[str, str | None]:
        """Return the (base, fragment) pair."""
        return self.base, self.fragment

    @classmethod
    def parse_with_root(cls, raw: str, source_path: str | Path, root: str | Path = "/") -> "Link":
        """Parse a raw link found in ``source_path``.

        Relative references are resolved against the directory holding
        ``source_path``. References starting with ``/`` are resolved against
        ``root`` instead of the filesystem root.

        Raises:
            LinkParseError: If the link is malformed or uses an unsupported scheme.
        """
        if "#" in raw:
            target, fragment = raw.split("#", 1)
        else:
            target, fragment = raw, None

        if not target:
            return cls(base=_normalize(str(source_path)), fragment=fragment)

        try:
            parts = urlsplit(target)
        except ValueError as e:
            raise LinkParseError(f"malformed link: {e}") from e

        scheme = parts.scheme.lower()
        # Single letters are Windows drive letters, not schemes
        if len(scheme) > 1:
            if scheme in _REMOTE_SCHEMES:
                if not parts.hostname:
                    raise LinkParseError(f"missing host in {scheme} link")
                base = urlunsplit((scheme, parts.netloc.lower(), parts.path, parts.query, ""))
                return cls(base=base, fragment=fragment)
            if scheme == "file":
                # file: URIs name the filesystem, not the document root
                return cls(base=_normalize(unquote(parts.path) or "/"), fragment=fragment)
            raise LinkParseError(f"unsupported scheme {scheme!r}")

        path = unquote(target.split("?", 1)[0])
        return cls(base=_join_local(path, source_path, root), fragment=fragment)


def _join_local(path: str, source_path: str | Path, root: str | Path) -> str:
    if not path:
        return _normalize(str(source_path))
    if path.startswith("/"):
        return _normalize(str(Path(root) / path.lstrip("/")))
    return _normalize(str(Path(source_path).parent / path))


def _normalize(path: str) -> str:
    return os.path.normpath(path)
