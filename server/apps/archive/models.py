"""Database models for archive app."""

from typing import Final, final, override

from django.db import models

# Constants for field max lengths
_NAME_MAX_LENGTH: Final = 255
_PATH_MAX_LENGTH: Final = 1024
_OWNER_MAX_LENGTH: Final = 255
_GROUP_MAX_LENGTH: Final = 64
_REVISION_MAX_LENGTH: Final = 128


@final
class Entry(models.Model):
    """Local mirror of a file or folder in the remote storage.

    The mirror lets listing, search and soft-delete work without asking
    the remote provider on every request. ``name`` is the base name that
    joins an entry with the remote listing; ``path`` is its parent folder
    in the remote namespace (``/`` or ``/a/b``).

    Removing an entry only clears ``visible``. Rows are deleted only by
    reconciliation, once the remote object is gone.
    """

    name = models.CharField(
        max_length=_NAME_MAX_LENGTH,
        db_index=True,
        help_text='Base name, matches the last segment of the remote path',
    )

    path = models.CharField(
        max_length=_PATH_MAX_LENGTH,
        default='/',
        help_text='Parent folder in the remote namespace',
    )

    is_directory = models.BooleanField(default=False)

    visible = models.BooleanField(
        default=True,
        help_text='Cleared when a member removes the entry',
    )

    # Who uploaded it (empty for entries discovered by reconciliation)
    owner = models.CharField(
        max_length=_OWNER_MAX_LENGTH,
        blank=True,
        default='',
    )

    group_affiliation = models.CharField(
        max_length=_GROUP_MAX_LENGTH,
        blank=True,
        default='',
        help_text='Group of the uploading member',
    )

    # Remote metadata (cached for listing)
    size_bytes = models.BigIntegerField(default=0)

    remote_modified = models.DateTimeField(null=True, blank=True)

    revision = models.CharField(
        max_length=_REVISION_MAX_LENGTH,
        blank=True,
        default='',
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Model metadata."""

        verbose_name = 'Entry'  # type: ignore[mutable-override]
        verbose_name_plural = 'Entries'  # type: ignore[mutable-override]
        ordering = ['-is_directory', 'name']

        indexes = [
            # Optimize folder listing queries
            models.Index(
                fields=['path', 'visible'],
                name='archive_path_visible_idx',
            ),
        ]

        constraints = [
            # One mirror row per name inside a folder
            models.UniqueConstraint(
                fields=['path', 'name'],
                name='archive_path_name_unique',
            ),
        ]

    @override
    def __str__(self) -> str:
        """String representation."""
        return self.remote_path

    @property
    def remote_path(self) -> str:
        """Full path of the entry in the remote namespace.

        Example: path '/docs', name 'report.pdf' -> '/docs/report.pdf'
        """
        if self.path.rstrip('/'):
            return f'{self.path.rstrip("/")}/{self.name}'
        return f'/{self.name}'
