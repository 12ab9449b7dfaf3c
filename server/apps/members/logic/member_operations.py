"""Business logic for member records."""

import logging
from typing import Final

from django.conf import settings
from django.core.cache import cache
from django.core.exceptions import ValidationError

from server.apps.members.models import Member

logger = logging.getLogger(__name__)

_AVATAR_CACHE_KEY: Final = 'members:avatar:{member_id}'


def get_avatar_cache_timeout() -> int:
    """Get how long avatar links stay cached.

    Returns:
        Timeout in seconds from settings or default of 3600 (1 hour).
    """
    return getattr(settings, 'MEMBERS_AVATAR_CACHE_TIMEOUT', 3600)


def avatar_cache_key(member_id: int) -> str:
    """Cache key holding the avatar link of one member."""
    return _AVATAR_CACHE_KEY.format(member_id=member_id)


def save_member(member: Member) -> bool:
    """Validate and save a member.

    Invalid members are not written: a missing name or e-mail, a
    malformed e-mail or one already taken all make this a no-op.

    Args:
        member: Member to save.

    Returns:
        True if the member was saved, False if validation failed.
    """
    try:
        member.full_clean()
    except ValidationError as exc:
        logger.warning(
            'Member %r not saved: %s',
            member.email,
            exc.message_dict,
        )
        return False

    member.save()
    return True


def cache_avatar(member_id: int, refresh: bool = False) -> str:
    """Get the avatar link of a member through the cache.

    Args:
        member_id: Member primary key.
        refresh: Reload the link from the database even if cached.

    Returns:
        Avatar URL, or '' if the member has none or does not exist.
    """
    key = avatar_cache_key(member_id)
    if refresh:
        avatar_url = _load_avatar(member_id)
        cache.set(key, avatar_url, get_avatar_cache_timeout())
        return avatar_url

    return cache.get_or_set(
        key,
        lambda: _load_avatar(member_id),
        get_avatar_cache_timeout(),
    )


def _load_avatar(member_id: int) -> str:
    avatar_url = (
        Member.objects.filter(pk=member_id)
        .values_list('avatar_url', flat=True)
        .first()
    )
    return avatar_url or ''
