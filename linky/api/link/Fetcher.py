"""Retrieve link targets and extract their anchors."""

from pathlib import Path
from urllib.parse import urlsplit

import requests  # type: ignore

from linky.utils.logger import get_logger

from .Document import Document, DocumentKind
from .extract_anchors import extract_anchors
from .HttpStatusError import HttpStatusError
from .LinkError import LinkError
from .RedirectError import RedirectError
from .Tag import Tag
from .Targets import Targets

logger = get_logger("fetcher")

_EXTENSIONS: dict[str, DocumentKind] = {
    ".md": "markdown",
    ".markdown": "markdown",
    ".mdown": "markdown",
    ".html": "html",
    ".htm": "html",
}

_CONTENT_TYPES: dict[str, DocumentKind] = {
    "text/markdown": "markdown",
    "text/x-markdown": "markdown",
    "text/html": "html",
    "application/xhtml+xml": "html",
}

_MISSING_STATUSES = (404, 410)


class _FetchFailed(Exception):
    """Internal signal carrying the tag and cause of a failed retrieval."""

    def __init__(self, tag: Tag, message: str, cause: BaseException):
        super().__init__(message)
        self.tag = tag
        self.message = message
        self.cause = cause


class Fetcher:
    """Retrieves link bases from the filesystem or over HTTP.

    One ``requests.Session`` is shared by all retrievals of a run. The
    redirect policy is fixed for the fetcher's lifetime.
    """

    def __init__(
        self,
        follow_redirects: bool = False,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ):
        self.follow_redirects = follow_redirects
        self.timeout = timeout
        self._session = session
        self._owns_session = session is None

    def __enter__(self) -> "Fetcher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def close(self) -> None:
        if self._owns_session and self._session is not None:
            self._session.close()
            self._session = None

    def fetch(self, base: str) -> Targets:
        """Retrieve ``base`` and return its anchor IDs, or the failure."""
        try:
            document = self.retrieve(base)
        except _FetchFailed as e:
            logger.debug("Fetching %s failed: %s", base, e.cause)
            return Targets.failed(e.tag, LinkError(base, e.message, e.cause))

        if document.kind == "other":
            return Targets.found(())

        try:
            text = document.content.decode(document.encoding)
        except (UnicodeDecodeError, LookupError) as e:
            return Targets.failed(Tag.DECODE_ERROR, LinkError(base, "decoding document", e))

        return Targets.found(extract_anchors(text, document.kind))

    def retrieve(self, base: str) -> Document:
        """Read the raw document behind ``base``.

        Raises:
            _FetchFailed: With the tag classifying the failure.
        """
        if base.startswith(("http://", "https://")):
            return self._retrieve_remote(base)
        return self._retrieve_local(Path(base))

    def _retrieve_local(self, path: Path) -> Document:
        logger.debug("Reading %s", path)
        if path.is_dir():
            return Document(content=b"", kind="other")
        try:
            content = path.read_bytes()
        except FileNotFoundError as e:
            raise _FetchFailed(Tag.NO_DOCUMENT, "reading file", e) from e
        except OSError as e:
            raise _FetchFailed(Tag.FETCH_FAILURE, "reading file", e) from e
        return Document(content=content, kind=_EXTENSIONS.get(path.suffix.lower(), "other"))

    def _retrieve_remote(self, url: str) -> Document:
        logger.debug("Fetching %s", url)
        try:
            response = self.session.get(url, allow_redirects=self.follow_redirects, timeout=self.timeout)
        except requests.RequestException as e:
            raise _FetchFailed(Tag.FETCH_FAILURE, "fetching", e) from e

        status = response.status_code
        if 300 <= status < 400:
            if not self.follow_redirects:
                cause = RedirectError(status, response.headers.get("Location"))
                raise _FetchFailed(Tag.REDIRECT, "fetching", cause)
        if not 200 <= status < 300:
            cause = HttpStatusError(status, response.reason or "")
            tag = Tag.NO_DOCUMENT if status in _MISSING_STATUSES else Tag.HTTP_STATUS
            raise _FetchFailed(tag, "fetching", cause)

        content_type = response.headers.get("Content-Type", "")
        mime = content_type.split(";", 1)[0].strip().lower()
        kind = _CONTENT_TYPES.get(mime)
        if kind is None:
            suffix = Path(urlsplit(url).path).suffix.lower()
            kind = _EXTENSIONS.get(suffix, "other") if mime in ("", "text/plain") else "other"

        # Without a declared charset, decode as UTF-8
        encoding = "utf-8"
        if "charset" in content_type.lower():
            encoding = requests.utils.get_encoding_from_headers({"content-type": content_type}) or encoding

        return Document(content=response.content, kind=kind, encoding=encoding)
