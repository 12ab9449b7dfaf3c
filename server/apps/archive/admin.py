"""Django admin configuration for archive app."""

from django.contrib import admin
from django.db.models import QuerySet
from django.http import HttpRequest

from server.apps.archive.models import Entry
from server.apps.archive.templatetags.archive_tags import format_size


@admin.register(Entry)
class EntryAdmin(admin.ModelAdmin[Entry]):
    """Admin interface for Entry model."""

    list_display = [
        'name',
        'path',
        'is_directory',
        'visible',
        'owner',
        'group_affiliation',
        'size_display',
        'remote_modified',
    ]

    list_filter = [
        'visible',
        'is_directory',
        'group_affiliation',
    ]

    search_fields = [
        'name',
        'path',
        'owner',
    ]

    readonly_fields = [
        'size_bytes',
        'remote_modified',
        'revision',
        'created_at',
        'updated_at',
    ]

    fieldsets = (
        ('Entry', {
            'fields': ('name', 'path', 'is_directory', 'visible'),
        }),
        ('Uploader', {
            'fields': ('owner', 'group_affiliation'),
        }),
        ('Remote Metadata', {
            'fields': ('size_bytes', 'remote_modified', 'revision'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
        }),
    )

    actions = ['show_entries', 'hide_entries']

    def size_display(self, obj: Entry) -> str:
        """Display size in human-readable format.

        Args:
            obj: Entry instance.

        Returns:
            Formatted size string (e.g., '3 MB').
        """
        if obj.is_directory:
            return '-'
        return format_size(obj.size_bytes)
    size_display.short_description = 'Size'  # type: ignore[attr-defined]

    @admin.action(description='Show selected entries')
    def show_entries(self, request: HttpRequest, queryset: QuerySet[Entry]) -> None:
        """Undo a member's removal."""
        updated = queryset.update(visible=True)
        self.message_user(request, f'{updated} entries shown.')

    @admin.action(description='Hide selected entries')
    def hide_entries(self, request: HttpRequest, queryset: QuerySet[Entry]) -> None:
        """Remove entries from member listings."""
        updated = queryset.update(visible=False)
        self.message_user(request, f'{updated} entries hidden.')
