"""Tests for member session management."""

from dataclasses import replace

import pytest
from django.core.cache import cache

from server.apps.members.exceptions import (
    IdentityProviderError,
    MemberValidationError,
    UnitMismatchError,
)
from server.apps.members.logic.member_operations import avatar_cache_key
from server.apps.members.logic.session_operations import (
    SESSION_MEMBER_KEY,
    SESSION_TOKEN_KEY,
    authenticate,
    end_session,
    establish_session,
    get_allowed_unit_id,
    get_current_member,
)
from server.apps.members.models import Member


class TestSessionConfig:
    """Tests for session configuration."""

    def test_allowed_unit_default(self, settings):
        """Test default allowed home unit."""
        del settings.MEMBERS_ALLOWED_UNIT_ID

        assert get_allowed_unit_id() == 1606

    def test_allowed_unit_from_settings(self, settings):
        """Test allowed home unit from settings."""
        settings.MEMBERS_ALLOWED_UNIT_ID = 7

        assert get_allowed_unit_id() == 7


class TestAuthenticate:
    """Tests for credential exchange."""

    def test_returns_token(self, identity_provider):
        """Test the provider token is returned."""
        assert authenticate('a@example.com', 'secret') == 'test-token'
        identity_provider.authenticate.assert_called_once_with(
            'a@example.com',
            'secret',
        )

    def test_rejected(self, identity_provider):
        """Test rejected credentials give no token."""
        identity_provider.authenticate.return_value = None

        assert authenticate('a@example.com', 'wrong') is None


@pytest.mark.django_db
class TestEstablishSession:
    """Tests for establish_session."""

    def test_creates_member_on_first_sign_in(
        self,
        session_request,
        member_directory,
        profile,
    ):
        """Test unseen members are created from the directory profile."""
        member = establish_session(session_request, 'test-token')

        assert member.email == profile.email
        assert member.display_name == profile.full_name
        assert member.avatar_url == profile.photo_url
        assert member.group_affiliation == '42'
        assert member.position == 'Finance'
        assert session_request.session[SESSION_MEMBER_KEY] == member.pk
        assert session_request.session[SESSION_TOKEN_KEY] == 'test-token'
        member_directory.current_person.assert_called_once_with('test-token')

    def test_existing_member_refreshes_group(
        self,
        session_request,
        member_directory,
        member,
        profile,
    ):
        """Test known members are reused and get the current group and avatar."""
        member_directory.current_person.return_value = replace(
            profile,
            email=member.email,
            full_name='Renamed Upstream',
            group_id='77',
        )

        signed_in = establish_session(session_request, 'test-token')

        assert signed_in.pk == member.pk
        member.refresh_from_db()
        assert member.group_affiliation == '77'
        assert member.avatar_url == profile.photo_url
        assert member.display_name == 'Test Member'
        assert Member.objects.count() == 1

    def test_cycles_session_key(self, session_request, member_directory):
        """Test the session key changes on sign-in."""
        session_request.session['archive_path'] = '/docs'
        session_request.session.save()
        old_key = session_request.session.session_key

        establish_session(session_request, 'test-token')

        assert session_request.session.session_key != old_key

    def test_warms_avatar_cache(self, session_request, member_directory, profile):
        """Test the avatar is cached under the member's own key."""
        member = establish_session(session_request, 'test-token')

        assert cache.get(avatar_cache_key(member.pk)) == profile.photo_url

    def test_replaces_stale_avatar_cache(
        self,
        session_request,
        member_directory,
        member,
        profile,
    ):
        """Test signing in again replaces an avatar cached earlier."""
        cache.set(avatar_cache_key(member.pk), member.avatar_url)
        member_directory.current_person.return_value = replace(
            profile,
            email=member.email,
        )

        establish_session(session_request, 'test-token')

        assert cache.get(avatar_cache_key(member.pk)) == profile.photo_url

    def test_unit_mismatch(self, session_request, member_directory, profile):
        """Test members of other home units are rejected."""
        member_directory.current_person.return_value = replace(
            profile,
            home_unit_id=1,
        )

        with pytest.raises(UnitMismatchError) as exc_info:
            establish_session(session_request, 'test-token')

        assert exc_info.value.unit_id == 1
        assert SESSION_MEMBER_KEY not in session_request.session
        assert Member.objects.count() == 0

    def test_invalid_profile(self, session_request, member_directory, profile):
        """Test profiles without a name do not make members."""
        member_directory.current_person.return_value = replace(
            profile,
            full_name='',
        )

        with pytest.raises(MemberValidationError):
            establish_session(session_request, 'test-token')

        assert SESSION_MEMBER_KEY not in session_request.session

    def test_directory_failure(self, session_request, member_directory):
        """Test directory errors propagate."""
        member_directory.current_person.side_effect = IdentityProviderError('down')

        with pytest.raises(IdentityProviderError):
            establish_session(session_request, 'test-token')


@pytest.mark.django_db
class TestCurrentMember:
    """Tests for reading and ending sessions."""

    def test_anonymous(self, session_request):
        """Test sessions without a member."""
        assert get_current_member(session_request) is None

    def test_signed_in(self, session_request, member):
        """Test the session's member is returned."""
        session_request.session[SESSION_MEMBER_KEY] = member.pk

        assert get_current_member(session_request) == member

    def test_stale_member_id(self, session_request):
        """Test ids of members that no longer exist."""
        session_request.session[SESSION_MEMBER_KEY] = 99999

        assert get_current_member(session_request) is None

    def test_end_session(self, session_request, member):
        """Test signing out drops all session data."""
        session_request.session[SESSION_MEMBER_KEY] = member.pk
        session_request.session[SESSION_TOKEN_KEY] = 'test-token'
        session_request.session['archive_path'] = '/docs'

        end_session(session_request)

        assert get_current_member(session_request) is None
        assert SESSION_TOKEN_KEY not in session_request.session
        assert 'archive_path' not in session_request.session
