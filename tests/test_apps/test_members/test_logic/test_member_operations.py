"""Tests for member avatar caching."""

import pytest
from django.core.cache import cache

from server.apps.members.logic.member_operations import (
    avatar_cache_key,
    cache_avatar,
    get_avatar_cache_timeout,
)
from server.apps.members.models import Member


class TestAvatarCacheConfig:
    """Tests for avatar cache configuration."""

    def test_default_timeout(self, settings):
        """Test default cache timeout."""
        del settings.MEMBERS_AVATAR_CACHE_TIMEOUT

        assert get_avatar_cache_timeout() == 3600

    def test_timeout_from_settings(self, settings):
        """Test cache timeout from settings."""
        settings.MEMBERS_AVATAR_CACHE_TIMEOUT = 60

        assert get_avatar_cache_timeout() == 60

    def test_key_is_per_member(self):
        """Test cache keys include the member id."""
        assert avatar_cache_key(1) == 'members:avatar:1'
        assert avatar_cache_key(1) != avatar_cache_key(2)


@pytest.mark.django_db
class TestCacheAvatar:
    """Tests for cache_avatar."""

    def test_returns_avatar(self, member):
        """Test the member's avatar link is returned and cached."""
        assert cache_avatar(member.pk) == member.avatar_url
        assert cache.get(avatar_cache_key(member.pk)) == member.avatar_url

    def test_avatar_is_per_member(self, member, other_member):
        """Test one member's avatar never shows for another."""
        assert cache_avatar(member.pk) == 'https://cdn.example.com/member.png'

    def test_refresh_reloads_cached_value(self, member, other_member):
        """Test a refresh reads the current link and caches it."""
        cache_avatar(member.pk)
        Member.objects.filter(pk=member.pk).update(avatar_url='https://cdn.example.com/x.png')

        assert cache_avatar(member.pk, refresh=True) == 'https://cdn.example.com/x.png'
        assert cache.get(avatar_cache_key(member.pk)) == 'https://cdn.example.com/x.png'
        assert cache_avatar(other_member.pk) == 'https://cdn.example.com/other.png'

    def test_cached_value_is_reused(self, member):
        """Test later changes are not seen until the entry expires."""
        cache_avatar(member.pk)
        Member.objects.filter(pk=member.pk).update(avatar_url='https://cdn.example.com/x.png')

        assert cache_avatar(member.pk) == 'https://cdn.example.com/member.png'

    def test_unknown_member(self):
        """Test unknown members have no avatar."""
        assert cache_avatar(99999) == ''
