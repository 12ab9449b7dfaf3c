"""Per-request context for mirror operations."""

from dataclasses import dataclass
from typing import final

from django.http import HttpRequest

from server.apps.archive.infrastructure.remote import (
    RemoteStorage,
    get_remote_storage,
)
from server.apps.archive.logic.navigation import get_current_path


@final
@dataclass(frozen=True)
class ArchiveContext:
    """Remote storage handle and current folder for one request."""

    storage: RemoteStorage
    path: str

    def remote_path(self, name: str) -> str:
        """Full remote path of a name inside the current folder."""
        return self.storage.paths.join_paths(self.path, name)


def build_context(request: HttpRequest) -> ArchiveContext:
    """Build the mirror context from the request session.

    Args:
        request: Current request.

    Returns:
        ArchiveContext for the session's current folder.
    """
    return ArchiveContext(
        storage=get_remote_storage(),
        path=get_current_path(request.session),
    )
