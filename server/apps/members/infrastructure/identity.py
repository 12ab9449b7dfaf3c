"""Identity provider client.

The identity provider has no token API. A token is obtained the way a
browser gets one: load the sign-in page, submit its form with the
member's credentials and read the token cookie the provider sets after
the redirects. Everything that depends on the page layout stays in this
module.
"""

import logging
from collections.abc import Callable
from typing import Final, final

import lxml.html
import requests
from django.conf import settings

logger = logging.getLogger(__name__)

_EMAIL_FIELD: Final = 'user[email]'
_PASSWORD_FIELD: Final = 'user[password]'

_SUBMIT_XPATH: Final = (
    './/input[@type="submit"][@name] | .//button[@type="submit"][@name]'
)


@final
class IdentityProviderClient:
    """Exchanges member credentials for an upstream API token."""

    def __init__(
        self,
        login_url: str,
        cookie_domain: str,
        cookie_name: str,
        timeout: int = 30,
        session_factory: Callable[[], requests.Session] | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            login_url: Sign-in page holding the credentials form.
            cookie_domain: Domain the token cookie is set for.
            cookie_name: Name of the token cookie.
            timeout: Seconds to wait for each HTTP response.
            session_factory: Builds the HTTP session used per attempt.
        """
        self._login_url = login_url
        self._cookie_domain = cookie_domain.lstrip('.')
        self._cookie_name = cookie_name
        self._timeout = timeout
        self._session_factory = session_factory or requests.Session

    def authenticate(self, email: str, password: str) -> str | None:
        """Sign in and return the upstream token.

        A single attempt with a fresh cookie jar; nothing is retried.

        Args:
            email: Member e-mail address.
            password: Member password, only forwarded to the provider.

        Returns:
            Token cookie value, or None when the provider rejected the
            credentials or could not be used.
        """
        session = self._session_factory()
        try:
            return self._sign_in(session, email, password)
        except requests.RequestException:
            logger.warning(
                'Identity provider unreachable for %s',
                email,
                exc_info=True,
            )
            return None
        finally:
            session.close()

    def _sign_in(
        self,
        session: requests.Session,
        email: str,
        password: str,
    ) -> str | None:
        page = session.get(self._login_url, timeout=self._timeout)
        if page.status_code != 200:
            logger.warning(
                'Sign-in page returned HTTP %d',
                page.status_code,
            )
            return None

        document = lxml.html.fromstring(page.text, base_url=self._login_url)
        if not document.forms:
            logger.warning('Sign-in page has no form: %s', self._login_url)
            return None

        form = document.forms[0]
        data = dict(form.form_values())
        data[_EMAIL_FIELD] = email
        data[_PASSWORD_FIELD] = password
        buttons = form.xpath(_SUBMIT_XPATH)
        if buttons:
            data[buttons[0].get('name')] = buttons[0].get('value', '')

        response = session.request(
            form.method,
            form.action or self._login_url,
            data=data,
            timeout=self._timeout,
        )
        if response.status_code != 200:
            logger.info(
                'Sign-in for %s ended with HTTP %d',
                email,
                response.status_code,
            )
            return None

        token = self._find_token(session)
        if token is None:
            logger.info('No token cookie issued for %s', email)
        return token

    def _find_token(self, session: requests.Session) -> str | None:
        for cookie in session.cookies:
            if (
                cookie.name == self._cookie_name
                and cookie.domain.lstrip('.') == self._cookie_domain
            ):
                return cookie.value
        return None


def get_identity_provider() -> IdentityProviderClient:
    """Get the identity provider client configured in settings.

    Returns:
        IdentityProviderClient for MEMBERS_LOGIN_URL.
    """
    return IdentityProviderClient(
        login_url=settings.MEMBERS_LOGIN_URL,
        cookie_domain=settings.MEMBERS_TOKEN_COOKIE_DOMAIN,
        cookie_name=settings.MEMBERS_TOKEN_COOKIE_NAME,
        timeout=getattr(settings, 'MEMBERS_HTTP_TIMEOUT', 30),
    )
