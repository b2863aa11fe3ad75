"""LinkParseError exception."""


class LinkParseError(ValueError):
    """Raised when a raw link string is not a usable link reference."""
