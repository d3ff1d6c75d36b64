"""
Errors raised while loading a master playlist.
"""


class ParseError(Exception):
    """Base class for everything parse() and from_uri() raise."""


class InvalidFormat(ParseError):
    """The document failed structural validation."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FetchFailed(ParseError):
    """
    The playlist text could not be retrieved.
    The underlying error is kept untouched on `error`.
    """

    def __init__(self, error: Exception):
        super().__init__(str(error))
        self.error = error
