"""RedirectError exception."""


class RedirectError(Exception):
    """A redirect response received while redirects are not followed."""

    def __init__(self, status_code: int, location: str | None):
        super().__init__(f"HTTP {status_code} redirect to {location or '<no location>'}")
        self.status_code = status_code
        self.location = location
