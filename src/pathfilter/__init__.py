"""pathfilter — decide which paths to process from allow/exclude glob lists."""

__version__ = "0.1.0"


class PathFilterError(Exception):
    """User-facing pathfilter error.

    The CLI prints the message to stderr and exits with code 1.
    """


class InvalidPatternError(PathFilterError):
    """A pattern failed validation while compiling a filter.

    Attributes:
        list_name: Which pattern list held the pattern (``"allowed"`` or
            ``"excluded"``).
        pattern: The offending pattern text, after group expansion.
    """

    def __init__(self, list_name: str, pattern: str, cause: Exception) -> None:
        super().__init__(f"{list_name} patterns are invalid: {cause}")
        self.list_name = list_name
        self.pattern = pattern
