"""Business logic for listing and changing mirrored entries."""

import logging
from typing import TYPE_CHECKING

from django.core.files.uploadedfile import UploadedFile
from django.db import transaction
from django.db.models import CharField, Q, QuerySet, Value
from django.db.models.functions import Concat, Substr

from server.apps.archive.exceptions import EntryConflictError, InvalidPathError
from server.apps.archive.models import Entry

if TYPE_CHECKING:
    from server.apps.archive.logic.context import ArchiveContext
    from server.apps.members.models import Member

logger = logging.getLogger(__name__)


def list_entries(path: str) -> QuerySet[Entry]:
    """List visible entries of a folder.

    Args:
        path: Remote folder path.

    Returns:
        QuerySet of visible entries in the folder.
    """
    return Entry.objects.filter(visible=True, path=path)


def search_entries(path: str, term: str) -> QuerySet[Entry]:
    """Find visible entries of a folder whose name contains a term.

    Matching is a case-sensitive substring scan over every mirrored name,
    done in Python rather than with a database LIKE.

    Args:
        path: Remote folder path.
        term: Text the name must contain.

    Returns:
        QuerySet of matching visible entries in the folder.
    """
    all_names = Entry.objects.values_list('name', flat=True)
    matches = [name for name in all_names if term in name]

    logger.debug('Search %r matched %d names', term, len(matches))
    return list_entries(path).filter(name__in=matches)


def upload_entry(
    context: 'ArchiveContext',
    member: 'Member',
    uploaded_file: UploadedFile | None,
) -> Entry | None:
    """Upload a file to the current folder and mirror it.

    Transaction safety: upload to remote storage first, then create the
    entry. If the DB insert fails, the uploaded object is removed again.

    Args:
        context: Remote storage and current folder.
        member: Uploading member, recorded as owner.
        uploaded_file: File from the upload form.

    Returns:
        Created Entry, or None when there was nothing to upload or an
        entry with that name already exists in the folder.
    """
    if uploaded_file is None or not uploaded_file.name:
        return None

    if Entry.objects.filter(path=context.path, name=uploaded_file.name).exists():
        logger.info(
            'Upload skipped, %s already exists in %s',
            uploaded_file.name,
            context.path,
        )
        return None

    # Step 1: Upload to remote storage
    remote_path = context.storage.put_file(
        context.remote_path(uploaded_file.name),
        uploaded_file,
    )

    # Step 2: Mirror the stored object
    try:
        with transaction.atomic():
            entry = Entry.objects.create(
                name=context.storage.paths.get_name(remote_path),
                path=context.path,
                is_directory=False,
                visible=True,
                owner=member.display_name,
                group_affiliation=member.group_affiliation,
                size_bytes=uploaded_file.size or 0,
            )
    except Exception:
        logger.exception(
            'Database insert failed, rolling back upload: %s',
            remote_path,
        )
        context.storage.remove(remote_path)
        raise

    logger.info(
        'Entry uploaded by %s: %s (ID: %d)',
        member.email,
        entry.remote_path,
        entry.id,
    )
    return entry


def rename_entry(
    context: 'ArchiveContext',
    old_name: str,
    new_name: str,
) -> Entry:
    """Rename an entry of the current folder, remotely and in the mirror.

    Renaming a folder also relocates every mirrored entry inside it, so
    removed entries stay hidden under the new name.

    Args:
        context: Remote storage and current folder.
        old_name: Current name.
        new_name: New name.

    Returns:
        Renamed Entry, unchanged when the name is the same.

    Raises:
        Entry.DoesNotExist: If no entry has ``old_name`` in the folder.
        EntryConflictError: If ``new_name`` is already taken, in the
            mirror or remotely.
    """
    entry = Entry.objects.get(path=context.path, name=old_name)
    if new_name == old_name:
        return entry
    if Entry.objects.filter(path=context.path, name=new_name).exists():
        raise EntryConflictError(context.path, new_name)

    old_path = entry.remote_path
    new_path = context.remote_path(new_name)
    context.storage.file_move(old_path, new_path)

    with transaction.atomic():
        entry.name = new_name
        entry.save(update_fields=['name', 'updated_at'])
        if entry.is_directory:
            _relocate_descendants(old_path, new_path)

    logger.info('Entry renamed in %s: %s -> %s', context.path, old_name, new_name)
    return entry


def move_entry(context: 'ArchiveContext', name: str, target: str) -> Entry:
    """Move an entry of the current folder to another folder.

    Relative targets are resolved against the current folder. Moving a
    folder also relocates every mirrored entry inside it.

    Args:
        context: Remote storage and current folder.
        name: Name of the entry to move.
        target: Destination folder.

    Returns:
        Moved Entry.

    Raises:
        Entry.DoesNotExist: If no entry has ``name`` in the folder.
        EntryConflictError: If the destination already has that name,
            in the mirror or remotely.
        InvalidPathError: If a folder would be moved into itself.
    """
    destination = context.storage.paths.resolve(context.path, target)
    entry = Entry.objects.get(path=context.path, name=name)
    if destination == context.path:
        return entry

    old_path = entry.remote_path
    if destination == old_path or destination.startswith(f'{old_path}/'):
        raise InvalidPathError(f'Cannot move {old_path} into itself')
    if Entry.objects.filter(path=destination, name=name).exists():
        raise EntryConflictError(destination, name)

    new_path = context.storage.paths.join_paths(destination, name)
    context.storage.file_move(old_path, new_path)

    with transaction.atomic():
        entry.path = destination
        entry.save(update_fields=['path', 'updated_at'])
        if entry.is_directory:
            _relocate_descendants(old_path, new_path)

    logger.info('Entry moved: %s from %s to %s', name, context.path, destination)
    return entry


def hide_entry(context: 'ArchiveContext', name: str) -> Entry:
    """Remove an entry from listings (soft delete).

    The remote object and the mirror row are kept.

    Args:
        context: Current folder.
        name: Name of the entry.

    Returns:
        Hidden Entry.

    Raises:
        Entry.DoesNotExist: If no entry has ``name`` in the folder.
    """
    entry = Entry.objects.get(path=context.path, name=name)
    entry.visible = False
    entry.save(update_fields=['visible', 'updated_at'])

    logger.info('Entry hidden: %s', entry.remote_path)
    return entry


def download_url(context: 'ArchiveContext', name: str) -> str:
    """Get a sharing link for a visible entry of the current folder.

    Args:
        context: Remote storage and current folder.
        name: Name of the entry.

    Returns:
        Link to the remote content.

    Raises:
        Entry.DoesNotExist: If no visible entry has ``name``.
    """
    entry = list_entries(context.path).get(name=name)
    return context.storage.shares(entry.remote_path)['url']


def _subtree(folder_path: str) -> QuerySet[Entry]:
    return Entry.objects.filter(
        Q(path=folder_path) | Q(path__startswith=f'{folder_path}/'),
    )


def _relocate_descendants(old_path: str, new_path: str) -> int:
    """Point every entry below a moved folder at its new location.

    Rows already below ``new_path`` mirror nothing remote (the move
    refused to overwrite) and are dropped first.

    Returns:
        Number of relocated entries.
    """
    _subtree(new_path).delete()
    relocated = _subtree(old_path).update(
        path=Concat(
            Value(new_path),
            Substr('path', len(old_path) + 1),
            output_field=CharField(),
        ),
    )
    logger.debug(
        'Relocated %d entries from %s to %s',
        relocated,
        old_path,
        new_path,
    )
    return relocated
