"""Template context for the signed-in member."""

from django.http import HttpRequest

from server.apps.members.logic.member_operations import cache_avatar
from server.apps.members.logic.session_operations import get_current_member


def current_member(request: HttpRequest) -> dict[str, object]:
    """Expose the signed-in member and their avatar to templates."""
    if not hasattr(request, 'session'):
        return {}
    member = getattr(request, 'member', None) or get_current_member(request)
    if member is None:
        return {'current_member': None, 'avatar_url': ''}
    return {
        'current_member': member,
        'avatar_url': cache_avatar(member.pk),
    }
