"""FragmentError exception."""


class FragmentError(Exception):
    """A fragment that could not be resolved against a document's anchors."""

    def __init__(self, fragment: str, message: str = "fragment not found"):
        super().__init__(f"{message}: #{fragment}")
        self.fragment = fragment
