"""Management command to reconcile the mirror with the remote storage."""

from typing import Any

from django.core.management.base import BaseCommand, CommandError

from server.apps.archive.infrastructure.remote import get_remote_storage
from server.apps.archive.logic.context import ArchiveContext
from server.apps.archive.logic.reconcile_operations import (
    SCOPE_GLOBAL,
    SCOPE_PATH,
    reconcile,
)
from server.apps.archive.path_mapper import ROOT_PATH


class Command(BaseCommand):
    """Run one reconciliation pass for a remote folder."""

    help = 'Reconcile mirrored entries with the remote folder listing'

    def add_arguments(self, parser: Any) -> None:
        """Add command line arguments.

        Args:
            parser: Argument parser.
        """
        parser.add_argument(
            '--path',
            default=ROOT_PATH,
            help=f'Remote folder to reconcile (default: {ROOT_PATH})',
        )
        parser.add_argument(
            '--scope',
            choices=[SCOPE_PATH, SCOPE_GLOBAL],
            default=None,
            help='Override ARCHIVE_RECONCILE_SCOPE for this run',
        )

    def handle(self, *args: Any, **options: Any) -> None:
        """Execute the reconcile command.

        Args:
            args: Positional arguments (unused).
            options: Command options.
        """
        storage = get_remote_storage()
        if not storage.paths.validate_path(options['path']):
            raise CommandError(f'Invalid folder path: {options["path"]!r}')

        context = ArchiveContext(
            storage=storage,
            path=storage.paths.normalize(options['path']),
        )
        self.stdout.write(f'Reconciling {context.path}')

        result = reconcile(context, scope=options['scope'])

        self.stdout.write(
            self.style.SUCCESS(
                f'{result.created} created, {result.updated} updated, '
                f'{result.destroyed} destroyed',
            ),
        )
