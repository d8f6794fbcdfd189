"""Exceptions raised by the co-authorship network model."""


class UnknownAuthorError(ValueError):
    """Raised when a query names an author that was never ingested."""

    def __init__(self, name: str):
        super().__init__(f"Unknown author: {name!r}")
        self.name = name


class NoAuthorsInIntervalError(LookupError):
    """Raised when no author published inside a requested year interval.

    This is an expected outcome of a query, not a programming error.
    """

    def __init__(self, min_year: int, max_year: int):
        super().__init__(f"No authors published between {min_year} and {max_year}")
        self.min_year = min_year
        self.max_year = max_year


class MalformedRecordError(ValueError):
    """Raised when an input line cannot be parsed into a publication record."""

    def __init__(self, message: str, line_number=None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
