"""Exceptions for archive app."""


class RemoteEntryNotFoundError(Exception):
    """Raised when a remote path names neither an object nor a folder."""

    def __init__(self, remote_path: str) -> None:
        """Initialize RemoteEntryNotFoundError.

        Args:
            remote_path: Remote path that could not be found.
        """
        self.remote_path = remote_path
        super().__init__(f'Remote entry not found: {remote_path}')


class EntryConflictError(Exception):
    """Raised when a rename or move would collide with a mirrored entry."""

    def __init__(self, path: str, name: str) -> None:
        """Initialize EntryConflictError.

        Args:
            path: Destination folder.
            name: Name already taken in that folder.
        """
        self.path = path
        self.name = name
        super().__init__(f'An entry named {name!r} already exists in {path}')


class InvalidPathError(ValueError):
    """Raised when a remote path fails validation."""
