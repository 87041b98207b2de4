"""Custom exception classes for the application."""


class SongVoteException(Exception):
    """Base exception for all SongVote errors."""

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)


class InvalidRequestError(SongVoteException):
    """Raised when client input is missing or malformed."""


class DuplicateVoteError(SongVoteException):
    """Raised when a user has already voted on a song."""

    def __init__(self, message: str = "User has already rated this song"):
        super().__init__(message)


class NotFoundError(SongVoteException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} with identifier '{identifier}' not found")


class StorageError(SongVoteException):
    """Raised when the persistence layer fails."""
