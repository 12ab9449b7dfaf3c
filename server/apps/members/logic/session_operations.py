"""Session management for signed-in members.

The Django session carries the member id and the upstream token. The
token is only kept for later directory calls; it is never shown and
never stored in the database.
"""

import logging
from typing import Final

from django.conf import settings
from django.http import HttpRequest

from server.apps.members.exceptions import (
    MemberValidationError,
    UnitMismatchError,
)
from server.apps.members.infrastructure.directory import (
    MemberProfile,
    get_member_directory,
)
from server.apps.members.infrastructure.identity import get_identity_provider
from server.apps.members.logic.member_operations import (
    cache_avatar,
    save_member,
)
from server.apps.members.models import Member

logger = logging.getLogger(__name__)

SESSION_MEMBER_KEY: Final = 'member_id'
SESSION_TOKEN_KEY: Final = 'upstream_token'


def get_allowed_unit_id() -> int:
    """Get the only home unit whose members may sign in.

    Returns:
        Unit id from settings or default of 1606.
    """
    return getattr(settings, 'MEMBERS_ALLOWED_UNIT_ID', 1606)


def authenticate(email: str, password: str) -> str | None:
    """Exchange credentials for an upstream token.

    Args:
        email: Member e-mail address.
        password: Member password.

    Returns:
        Upstream token, or None if the credentials were rejected.
    """
    token = get_identity_provider().authenticate(email, password)
    if token is None:
        logger.warning('Authentication failed for member: %s', email)
    return token


def establish_session(request: HttpRequest, token: str) -> Member:
    """Sign a member in with an upstream token.

    Looks the token owner up in the directory, creates the local member
    on first sign-in and binds it to a fresh session key.

    Args:
        request: Current request.
        token: Upstream token from ``authenticate``.

    Returns:
        Signed-in Member.

    Raises:
        IdentityProviderError: If the directory lookup fails.
        UnitMismatchError: If the member belongs to another home unit.
        MemberValidationError: If the profile does not make a valid member.
    """
    profile = get_member_directory().current_person(token)

    allowed_unit_id = get_allowed_unit_id()
    if profile.home_unit_id != allowed_unit_id:
        logger.warning(
            'Member %s rejected, home unit %s',
            profile.email,
            profile.home_unit_id,
        )
        raise UnitMismatchError(profile.home_unit_id, allowed_unit_id)

    member = _sync_member(profile)

    request.session.cycle_key()
    request.session[SESSION_MEMBER_KEY] = member.pk
    request.session[SESSION_TOKEN_KEY] = token
    cache_avatar(member.pk, refresh=True)

    logger.info('Member signed in: %s (ID: %d)', member.email, member.pk)
    return member


def get_current_member(request: HttpRequest) -> Member | None:
    """Get the member bound to the request session.

    Args:
        request: Current request.

    Returns:
        Signed-in Member, or None for anonymous sessions.
    """
    member_id = request.session.get(SESSION_MEMBER_KEY)
    if member_id is None:
        return None
    return Member.objects.filter(pk=member_id).first()


def end_session(request: HttpRequest) -> None:
    """Sign the current member out and drop all session data.

    Args:
        request: Current request.
    """
    member_id = request.session.get(SESSION_MEMBER_KEY)
    request.session.flush()
    if member_id is not None:
        logger.info('Member signed out: ID %s', member_id)


def _sync_member(profile: MemberProfile) -> Member:
    member = Member.objects.filter(email=profile.email).first()
    if member is None:
        member = Member(
            display_name=profile.full_name,
            email=profile.email,
            avatar_url=profile.photo_url,
            group_affiliation=profile.group_id,
            position=profile.team_type,
        )
        logger.info('Creating member on first sign-in: %s', profile.email)
    else:
        member.group_affiliation = profile.group_id
        member.avatar_url = profile.photo_url

    if not save_member(member):
        raise MemberValidationError(profile.email)
    return member
