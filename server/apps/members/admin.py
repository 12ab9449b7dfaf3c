"""Django admin configuration for members app."""

from typing import override

from django.contrib import admin
from django.http import HttpRequest

from server.apps.members.models import Member


@admin.register(Member)
class MemberAdmin(admin.ModelAdmin[Member]):
    """Admin interface for Member model."""

    list_display = [
        'display_name',
        'email',
        'group_affiliation',
        'position',
        'created_at',
    ]

    list_filter = [
        'group_affiliation',
        'position',
    ]

    search_fields = [
        'display_name',
        'email',
    ]

    readonly_fields = [
        'created_at',
    ]

    fieldsets = (
        ('Member', {
            'fields': ('display_name', 'email', 'avatar_url'),
        }),
        ('Directory', {
            'fields': ('group_affiliation', 'position'),
        }),
        ('Timestamps', {
            'fields': ('created_at',),
        }),
    )

    @override
    def has_delete_permission(
        self,
        request: HttpRequest,
        obj: Member | None = None,
    ) -> bool:
        """Disable deleting members via admin.

        Members are kept once created; uploads reference their names.

        Args:
            request: HTTP request.
            obj: Optional Member instance.

        Returns:
            False - members cannot be deleted.
        """
        return False
