"""Path translation between remote paths and storage keys.

Remote paths are what members navigate: /documents/report.pdf.
Storage keys are bucket object names: documents/report.pdf. Any bucket
prefix is applied by the storage backend (its ``location`` option).
"""

from typing import Final, final

# Character used to split remote paths
_PATH_SEPARATOR: Final = '/'

ROOT_PATH: Final = '/'


@final
class PathMapper:
    """Translates between remote paths and storage keys.

    Remote paths always start with a slash and never end with one,
    except the root itself. This class handles all path normalization,
    joining and validation.
    """

    def normalize(self, remote_path: str | None) -> str:
        """Normalize a remote path.

        Args:
            remote_path: Path as supplied (e.g., 'docs/', '//docs', None).

        Returns:
            Normalized path (e.g., /docs). Returns / for empty input.
        """
        parts = [
            part
            for part in (remote_path or '').split(_PATH_SEPARATOR)
            if part
        ]
        return _PATH_SEPARATOR + _PATH_SEPARATOR.join(parts)

    def to_storage_key(self, remote_path: str) -> str:
        """Convert remote path to storage key.

        Args:
            remote_path: Remote path (e.g., /documents/file.pdf).

        Returns:
            Storage key (e.g., documents/file.pdf). The root maps to ''.
        """
        return self.normalize(remote_path).strip(_PATH_SEPARATOR)

    def to_remote_path(self, storage_key: str) -> str:
        """Convert storage key to remote path.

        Args:
            storage_key: Storage key (e.g., documents/file).

        Returns:
            Remote path (e.g., /documents/file).
        """
        return self.normalize(storage_key)

    def get_parent_path(self, remote_path: str) -> str:
        """Get parent folder of a remote path.

        Args:
            remote_path: Remote path (e.g., /documents/reports/file.pdf).

        Returns:
            Parent path (e.g., /documents/reports).
            Returns / for root-level items.
        """
        normalized = self.normalize(remote_path).strip(_PATH_SEPARATOR)

        if _PATH_SEPARATOR not in normalized:
            return ROOT_PATH

        parent = normalized.rsplit(_PATH_SEPARATOR, 1)[0]
        return _PATH_SEPARATOR + parent

    def get_name(self, remote_path: str) -> str:
        """Get file or folder name from remote path.

        Args:
            remote_path: Remote path (e.g., /documents/file.pdf).

        Returns:
            Name component (e.g., file.pdf).
            Returns empty string for root path.
        """
        normalized = self.normalize(remote_path).strip(_PATH_SEPARATOR)
        return normalized.rsplit(_PATH_SEPARATOR, 1)[-1]

    def join_paths(self, parent: str, name: str) -> str:
        """Join parent path and name to create full remote path.

        Args:
            parent: Parent remote path (e.g., /documents).
            name: Name to append (e.g., file.pdf).

        Returns:
            Joined path (e.g., /documents/file.pdf).
        """
        return self.normalize(f'{parent}{_PATH_SEPARATOR}{name}')

    def resolve(self, current_path: str, target: str) -> str:
        """Resolve a move target against the current folder.

        Args:
            current_path: Folder the member is looking at.
            target: Absolute (/archive) or relative (archive/2016) folder.

        Returns:
            Normalized absolute folder path.
        """
        if target.startswith(_PATH_SEPARATOR):
            return self.normalize(target)
        return self.join_paths(current_path, target)

    def breadcrumbs(self, remote_path: str) -> list[str]:
        """List every ancestor of a path, outermost first.

        Example: /a/b/c -> ['/a', '/a/b', '/a/b/c']

        Args:
            remote_path: Remote folder path.

        Returns:
            Ancestor paths including the path itself; empty for root.
        """
        parts = self.normalize(remote_path).strip(_PATH_SEPARATOR)
        if not parts:
            return []

        segments = parts.split(_PATH_SEPARATOR)
        return [
            _PATH_SEPARATOR + _PATH_SEPARATOR.join(segments[:index + 1])
            for index in range(len(segments))
        ]

    def is_root(self, remote_path: str) -> bool:
        """Check if path is the root folder.

        Args:
            remote_path: Remote path to check.

        Returns:
            True if path is the root folder.
        """
        return not remote_path.strip(_PATH_SEPARATOR)

    def validate_path(self, remote_path: str) -> bool:
        """Validate remote path for security.

        Checks for path traversal attacks and invalid characters.

        Args:
            remote_path: Remote path to validate.

        Returns:
            True if path is valid and safe.
        """
        # Check for path traversal attempts
        if '..' in remote_path.split(_PATH_SEPARATOR):
            return False

        # Check for null bytes
        return '\x00' not in remote_path
