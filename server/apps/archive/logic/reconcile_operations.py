"""Business logic for reconciling the mirror with the remote listing."""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, final

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import transaction

from server.apps.archive.models import Entry

if TYPE_CHECKING:
    from server.apps.archive.infrastructure.remote import RemoteEntry
    from server.apps.archive.logic.context import ArchiveContext

logger = logging.getLogger(__name__)

# Only entries of the reconciled folder are compared
SCOPE_PATH: Final = 'path'
# Every entry in the mirror is compared by name alone
SCOPE_GLOBAL: Final = 'global'

_SCOPES: Final = frozenset((SCOPE_PATH, SCOPE_GLOBAL))


@final
@dataclass(frozen=True)
class ReconcileResult:
    """Counts of mirror rows touched by one reconciliation pass."""

    created: int = 0
    updated: int = 0
    destroyed: int = 0


def get_reconcile_scope() -> str:
    """Get the configured reconciliation scope.

    Returns:
        'path' (default) or 'global'.

    Raises:
        ImproperlyConfigured: If the setting holds another value.
    """
    scope = getattr(settings, 'ARCHIVE_RECONCILE_SCOPE', SCOPE_PATH)
    if scope not in _SCOPES:
        raise ImproperlyConfigured(
            f'ARCHIVE_RECONCILE_SCOPE must be one of {sorted(_SCOPES)}, '
            f'got {scope!r}',
        )
    return scope


def reconcile(
    context: 'ArchiveContext',
    scope: str | None = None,
) -> ReconcileResult:
    """Synchronize mirrored entries with the remote listing of a folder.

    Remote entries with no mirrored name are created visible. Mirrored
    entries whose name is missing from the listing are deleted for good.
    ``visible`` is never changed here, so an entry a member removed stays
    hidden while it still exists remotely.

    With the 'path' scope both checks only look at entries of the
    reconciled folder. The 'global' scope matches names anywhere in the
    mirror and deletes entries of other folders whose name is missing
    from this listing.

    Args:
        context: Remote storage and folder to reconcile.
        scope: Override for ARCHIVE_RECONCILE_SCOPE.

    Returns:
        ReconcileResult with the number of created, updated and
        destroyed entries.

    Raises:
        Exception: If the remote listing cannot be fetched; the mirror
            is left untouched.
    """
    scope = scope or get_reconcile_scope()
    if scope not in _SCOPES:
        raise ValueError(f'Unknown reconcile scope: {scope!r}')

    # Fetch before touching the database
    folder = context.storage.metadata(context.path)
    remote_names = [remote_entry.name for remote_entry in folder.contents]

    created = 0
    updated = 0
    with transaction.atomic():
        for remote_entry in folder.contents:
            existing = _find_mirrored(remote_entry.name, context.path, scope)
            if existing is None:
                _create_entry(remote_entry, context.path)
                created += 1
            elif existing.path == context.path and _refresh_entry(
                existing,
                remote_entry,
            ):
                updated += 1

        stale = Entry.objects.exclude(name__in=remote_names)
        if scope == SCOPE_PATH:
            stale = stale.filter(path=context.path)
        destroyed, _ = stale.delete()

    logger.info(
        'Reconciled %s (%s scope): %d created, %d updated, %d destroyed',
        context.path,
        scope,
        created,
        updated,
        destroyed,
    )
    return ReconcileResult(
        created=created,
        updated=updated,
        destroyed=destroyed,
    )


def _find_mirrored(name: str, path: str, scope: str) -> Entry | None:
    entries = Entry.objects.filter(name=name)
    if scope == SCOPE_PATH:
        entries = entries.filter(path=path)
    return entries.first()


def _create_entry(remote_entry: 'RemoteEntry', path: str) -> Entry:
    entry = Entry.objects.create(
        name=remote_entry.name,
        path=path,
        is_directory=remote_entry.is_dir,
        visible=True,
        size_bytes=remote_entry.size_bytes,
        remote_modified=remote_entry.modified,
        revision=remote_entry.revision,
    )
    logger.debug('Mirrored new remote entry: %s', entry.remote_path)
    return entry


def _refresh_entry(entry: Entry, remote_entry: 'RemoteEntry') -> bool:
    """Copy changed remote metadata onto an entry.

    Returns:
        True if the entry was saved.
    """
    changed = (
        entry.size_bytes != remote_entry.size_bytes
        or entry.remote_modified != remote_entry.modified
        or entry.revision != remote_entry.revision
    )
    if not changed:
        return False

    entry.size_bytes = remote_entry.size_bytes
    entry.remote_modified = remote_entry.modified
    entry.revision = remote_entry.revision
    entry.save(update_fields=[
        'size_bytes',
        'remote_modified',
        'revision',
        'updated_at',
    ])
    return True
