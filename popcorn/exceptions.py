class PopcornError(Exception):
    """Base class for errors surfaced to the user as a message."""


class NetworkError(PopcornError):
    """Raised when the movie database cannot be reached or answers with a failure."""


class NotFoundError(PopcornError):
    """Raised when the movie database has no matching records."""


class MalformedDetailError(PopcornError):
    """Raised when a record is missing a field or has it in an unexpected shape."""


class DuplicateEntryError(PopcornError):
    """Raised when an entity that must be unique already exists."""
