"""LinkSourceError exception."""


class LinkSourceError(Exception):
    """Raised when a document cannot be read for links."""
