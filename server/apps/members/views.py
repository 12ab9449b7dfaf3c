"""Views for signing members in and out."""

import logging
from typing import Final

from django.contrib import messages
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_http_methods

from server.apps.members.decorators import member_required
from server.apps.members.exceptions import (
    IdentityProviderError,
    MemberValidationError,
    UnitMismatchError,
)
from server.apps.members.forms import LoginForm
from server.apps.members.logic.session_operations import (
    authenticate,
    end_session,
    establish_session,
    get_current_member,
)

logger = logging.getLogger(__name__)

_LOGIN_URL: Final = 'members:login'
_WELCOME_URL: Final = 'members:welcome'

_INVALID_CREDENTIALS: Final = 'Invalid e-mail or password.'
_UNIT_NOT_ALLOWED: Final = 'Member Drive is only available to members of the home unit.'
_SIGN_IN_FAILED: Final = 'Could not load your member profile. Please try again.'


@require_GET
def index(request: HttpRequest) -> HttpResponse:
    """Send visitors to the login page."""
    return redirect(_LOGIN_URL)


@require_http_methods(['GET', 'POST'])
def login(request: HttpRequest) -> HttpResponse:
    """Show the login form or sign a member in with their credentials."""
    if request.method == 'GET':
        if get_current_member(request) is not None:
            return redirect(_WELCOME_URL)
        return render(request, 'members/login.html', {'form': LoginForm()})

    form = LoginForm(request.POST)
    if not form.is_valid():
        messages.warning(request, _INVALID_CREDENTIALS)
        return redirect(_LOGIN_URL)

    token = authenticate(
        form.cleaned_data['email'],
        form.cleaned_data['password'],
    )
    if token is None:
        messages.warning(request, _INVALID_CREDENTIALS)
        return redirect(_LOGIN_URL)

    try:
        establish_session(request, token)
    except UnitMismatchError:
        messages.warning(request, _UNIT_NOT_ALLOWED)
        return redirect(_LOGIN_URL)
    except (IdentityProviderError, MemberValidationError):
        logger.exception(
            'Sign-in failed after authentication: %s',
            form.cleaned_data['email'],
        )
        messages.warning(request, _SIGN_IN_FAILED)
        return redirect(_LOGIN_URL)

    return redirect(_WELCOME_URL)


@member_required
@require_GET
def welcome(request: HttpRequest) -> HttpResponse:
    """Landing page after sign-in."""
    return render(request, 'members/welcome.html')


@require_GET
def logout(request: HttpRequest) -> HttpResponse:
    """Sign out and go back to the login page."""
    end_session(request)
    return redirect(_LOGIN_URL)
