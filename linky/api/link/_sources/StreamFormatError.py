"""StreamFormatError exception."""


class StreamFormatError(ValueError):
    """Raised when a pre-extracted link line does not match the expected format."""

    def __init__(self, line_number: int, line: str):
        super().__init__(f"malformed input line {line_number}: {line!r}")
        self.line_number = line_number
        self.line = line
