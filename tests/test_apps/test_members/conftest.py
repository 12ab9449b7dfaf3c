"""Shared fixtures for members app tests."""

from unittest import mock

import pytest
from django.contrib.sessions.backends.db import SessionStore

from server.apps.members.infrastructure.directory import MemberProfile


@pytest.fixture
def profile():
    """Directory profile of an allowed member.

    Returns:
        MemberProfile in the allowed home unit.
    """
    return MemberProfile(
        email='new@example.com',
        full_name='New Member',
        home_unit_id=1606,
        group_id='42',
        photo_url='https://cdn.example.com/new.png',
        team_type='Finance',
    )


@pytest.fixture
def identity_provider(monkeypatch):
    """Replace the identity provider with a mock.

    Returns:
        Mock whose ``authenticate`` returns 'test-token'.
    """
    provider = mock.Mock()
    provider.authenticate.return_value = 'test-token'
    monkeypatch.setattr(
        'server.apps.members.logic.session_operations.get_identity_provider',
        lambda: provider,
    )
    return provider


@pytest.fixture
def member_directory(monkeypatch, profile):
    """Replace the member directory with a mock.

    Returns:
        Mock whose ``current_person`` returns ``profile``.
    """
    directory = mock.Mock()
    directory.current_person.return_value = profile
    monkeypatch.setattr(
        'server.apps.members.logic.session_operations.get_member_directory',
        lambda: directory,
    )
    return directory


@pytest.fixture
def session_request(rf):
    """Request carrying a database session.

    Returns:
        RequestFactory request with ``session`` attached.
    """
    request = rf.post('/authentication/login')
    request.session = SessionStore()
    return request
