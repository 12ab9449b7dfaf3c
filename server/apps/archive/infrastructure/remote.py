"""Remote storage provider used by the metadata mirror.

Wraps the bucket storage behind the four calls the mirror needs:
``metadata`` (folder listing), ``put_file``, ``file_move`` and ``shares``.
Everything speaks remote paths (``/docs/report.pdf``); the bucket keys
stay inside this module.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import IO, TYPE_CHECKING, Any, final

from django.core.files.storage import default_storage

from server.apps.archive.exceptions import (
    EntryConflictError,
    RemoteEntryNotFoundError,
)
from server.apps.archive.path_mapper import PathMapper

if TYPE_CHECKING:
    from server.apps.archive.infrastructure.storage import FileStorage

logger = logging.getLogger(__name__)


@final
@dataclass(frozen=True)
class RemoteEntry:
    """One item of a remote folder listing."""

    path: str
    is_dir: bool
    size_bytes: int = 0
    client_mtime: datetime | None = None
    modified: datetime | None = None
    revision: str = ''

    @property
    def name(self) -> str:
        """Base name, the last segment of ``path``."""
        return self.path.rstrip('/').rsplit('/', 1)[-1]


@final
@dataclass(frozen=True)
class RemoteFolder:
    """Listing of a remote folder."""

    path: str
    contents: list[RemoteEntry] = field(default_factory=list)


@final
class RemoteStorage:
    """Remote storage provider on top of the bucket storage backend."""

    def __init__(
        self,
        storage: 'FileStorage',
        path_mapper: PathMapper | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            storage: Bucket storage backend.
            path_mapper: Remote path to storage key translation.
        """
        self._storage = storage
        self._paths = path_mapper or PathMapper()

    @property
    def paths(self) -> PathMapper:
        """Get the path mapper used by this provider."""
        return self._paths

    def metadata(self, remote_path: str) -> RemoteFolder:
        """List the direct children of a remote folder.

        Args:
            remote_path: Remote folder path (e.g., /docs).

        Returns:
            RemoteFolder with one RemoteEntry per child.

        Raises:
            Exception: Whatever the storage backend raises; not retried.
        """
        folder_path = self._paths.normalize(remote_path)
        folder_key = self._paths.to_storage_key(folder_path)

        folders, objects = self._storage.list_folder(folder_key)

        contents = [
            RemoteEntry(
                path=self._paths.join_paths(folder_path, folder_name),
                is_dir=True,
            )
            for folder_name in folders
        ]
        contents.extend(
            self._to_remote_entry(folder_path, summary)
            for summary in objects
        )

        logger.info(
            'Fetched remote listing for %s: %d entries',
            folder_path,
            len(contents),
        )
        return RemoteFolder(path=folder_path, contents=contents)

    def put_file(self, remote_path: str, content: IO[Any]) -> str:
        """Upload content to a remote path.

        Existing objects are never overwritten: the backend picks a free
        name instead.

        Args:
            remote_path: Target remote path.
            content: File-like object.

        Returns:
            Remote path the content was actually stored at.
        """
        saved_key = self._storage.save(
            self._paths.to_storage_key(remote_path),
            content,
        )
        return self._paths.to_remote_path(saved_key)

    def file_move(self, source: str, destination: str) -> None:
        """Move or rename a remote file or folder.

        Existing remote content is never overwritten.

        Args:
            source: Current remote path.
            destination: New remote path.

        Raises:
            RemoteEntryNotFoundError: If nothing exists at ``source``.
            EntryConflictError: If a file or folder exists at ``destination``.
        """
        source_key = self._paths.to_storage_key(source)
        destination_key = self._paths.to_storage_key(destination)

        if self._is_taken(destination_key):
            raise EntryConflictError(
                self._paths.get_parent_path(destination),
                self._paths.get_name(destination),
            )

        if self._storage.exists(source_key):
            self._storage.move_object(source_key, destination_key)
        elif self._storage.has_prefix(source_key):
            self._storage.move_prefix(source_key, destination_key)
        else:
            raise RemoteEntryNotFoundError(source)

    def shares(self, remote_path: str) -> dict[str, str]:
        """Create a sharing link for a remote file.

        Args:
            remote_path: Remote file path.

        Returns:
            Mapping with the link under ``url``.
        """
        return {'url': self._storage.url(self._paths.to_storage_key(remote_path))}

    def remove(self, remote_path: str) -> None:
        """Remove a remote file after a failed mirror update.

        Best effort: failures are logged, not raised.

        Args:
            remote_path: Remote file path.
        """
        self._storage.rollback_upload(self._paths.to_storage_key(remote_path))

    def _is_taken(self, key: str) -> bool:
        return self._storage.exists(key) or self._storage.has_prefix(key)

    def _to_remote_entry(
        self,
        folder_path: str,
        summary: dict[str, Any],
    ) -> RemoteEntry:
        modified = summary.get('LastModified')
        return RemoteEntry(
            path=self._paths.join_paths(folder_path, summary['Key']),
            is_dir=False,
            size_bytes=int(summary.get('Size') or 0),
            # Buckets keep a single timestamp per object
            client_mtime=modified,
            modified=modified,
            revision=str(summary.get('ETag', '')).strip('"'),
        )


def get_remote_storage() -> RemoteStorage:
    """Get the remote storage provider over the default storage.

    Returns:
        RemoteStorage bound to the configured bucket.
    """
    return RemoteStorage(default_storage)  # type: ignore[arg-type]
