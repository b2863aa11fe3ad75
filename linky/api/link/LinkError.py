"""LinkError exception (UNO: single model)."""


class LinkError(Exception):
    """A failure tied to one link base, wrapping the underlying cause.

    The cause is stored as ``__cause__`` so the chain reads the same whether
    it is walked here or printed by a traceback.
    """

    def __init__(self, base: str, message: str, cause: BaseException | None = None):
        super().__init__(f"{message}: {base}")
        self.base = base
        self.message = message
        self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        """Next error in the chain, or None."""
        return self.__cause__
