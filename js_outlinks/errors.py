"""Exception types raised by the extraction engine."""


class ConfigurationError(ValueError):
    """A configured pattern or limit is unusable.

    Raised once at start-up; the component must not run with it.
    """


class TreeTooDeepError(RecursionError):
    """The document tree nests deeper than the configured walk limit."""

    def __init__(self, depth: int, limit: int) -> None:
        super().__init__(f"document tree deeper than {limit} levels (reached {depth})")
        self.depth = depth
        self.limit = limit
