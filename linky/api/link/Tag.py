"""Tag enum for link check outcomes."""

from enum import Enum


class Tag(str, Enum):
    """Classification of a link check failure.

    The value doubles as the display string and the ``--mute`` token.
    """

    PARSE_ERROR = "parse-error"
    FETCH_FAILURE = "fetch-failure"
    NO_DOCUMENT = "no-document"
    HTTP_STATUS = "http-status"
    REDIRECT = "redirect-not-followed"
    DECODE_ERROR = "decode-error"
    EMPTY_FRAGMENT = "fragment-empty"
    NO_FRAGMENT = "fragment-not-found"

    def __str__(self) -> str:
        return self.value
