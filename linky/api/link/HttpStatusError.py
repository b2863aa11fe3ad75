"""HttpStatusError exception."""


class HttpStatusError(Exception):
    """A non-success HTTP response."""

    def __init__(self, status_code: int, reason: str = ""):
        detail = f"HTTP {status_code} {reason}".rstrip()
        super().__init__(detail)
        self.status_code = status_code
        self.reason = reason
