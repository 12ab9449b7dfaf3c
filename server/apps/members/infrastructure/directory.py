"""Member directory client.

The directory answers "who owns this token" with a JSON document::

    {
        "person": {
            "email": "...",
            "full_name": "...",
            "home_mc": {"id": 1606},
            "home_lc": {"id": 42},
            "profile_photo_url": "https://..."
        },
        "current_position": {"team": {"team_type": "..."}}
    }
"""

import logging
from dataclasses import dataclass
from typing import Any, final

import requests
from django.conf import settings

from server.apps.members.exceptions import IdentityProviderError

logger = logging.getLogger(__name__)


@final
@dataclass(frozen=True)
class MemberProfile:
    """Directory view of the member owning a token."""

    email: str
    full_name: str
    home_unit_id: int | None
    group_id: str
    photo_url: str = ''
    team_type: str = ''


@final
class MemberDirectoryClient:
    """Looks up the current member of an upstream token."""

    def __init__(
        self,
        url: str,
        timeout: int = 30,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            url: Current person endpoint.
            timeout: Seconds to wait for the response.
            session: HTTP session; a new one is used when omitted.
        """
        self._url = url
        self._timeout = timeout
        self._session = session or requests.Session()

    def current_person(self, token: str) -> MemberProfile:
        """Fetch the profile of the member owning a token.

        Args:
            token: Upstream token from the identity provider.

        Returns:
            MemberProfile of the token owner.

        Raises:
            IdentityProviderError: If the request fails or the response
                is not a profile document.
        """
        try:
            response = self._session.get(
                self._url,
                params={'access_token': token},
                timeout=self._timeout,
            )
            response.raise_for_status()
            document = response.json()
        except (requests.RequestException, ValueError) as exc:
            logger.warning('Member directory request failed: %s', exc)
            raise IdentityProviderError(
                f'Member directory request failed: {exc}',
            ) from exc

        try:
            return _to_profile(document)
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning('Unexpected member directory document: %r', exc)
            raise IdentityProviderError(
                'Member directory returned an unexpected document',
            ) from exc


def _to_profile(document: dict[str, Any]) -> MemberProfile:
    person = document['person']
    home_unit = person.get('home_mc') or {}
    home_group = person.get('home_lc') or {}
    position = document.get('current_position') or {}
    team = position.get('team') or {}

    home_unit_id = home_unit.get('id')
    group_id = home_group.get('id')
    return MemberProfile(
        email=person['email'],
        full_name=person.get('full_name') or '',
        home_unit_id=int(home_unit_id) if home_unit_id is not None else None,
        group_id='' if group_id is None else str(group_id),
        photo_url=person.get('profile_photo_url') or '',
        team_type=team.get('team_type') or '',
    )


def get_member_directory() -> MemberDirectoryClient:
    """Get the member directory client configured in settings.

    Returns:
        MemberDirectoryClient for MEMBERS_DIRECTORY_URL.
    """
    return MemberDirectoryClient(
        url=settings.MEMBERS_DIRECTORY_URL,
        timeout=getattr(settings, 'MEMBERS_HTTP_TIMEOUT', 30),
    )
