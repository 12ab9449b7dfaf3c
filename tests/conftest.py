"""Fixtures shared by every app."""

import pytest
from django.core.cache import cache

from server.apps.members.models import Member


@pytest.fixture(autouse=True)
def _clear_cache():
    """Start every test with an empty cache."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def member(db):
    """Create test member.

    Returns:
        Member instance for testing.
    """
    return Member.objects.create(
        display_name='Test Member',
        email='member@example.com',
        avatar_url='https://cdn.example.com/member.png',
        group_affiliation='42',
        position='Marketing',
    )


@pytest.fixture
def other_member(db):
    """Create second test member for isolation tests.

    Returns:
        Second member instance.
    """
    return Member.objects.create(
        display_name='Other Member',
        email='other@example.com',
        avatar_url='https://cdn.example.com/other.png',
        group_affiliation='43',
    )


@pytest.fixture
def member_client(client, member):
    """Test client signed in as ``member``.

    Returns:
        Django test client with a member session.
    """
    session = client.session
    session['member_id'] = member.pk
    session['upstream_token'] = 'test-token'
    session.save()
    return client
