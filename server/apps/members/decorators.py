"""View decorators for member-only pages."""

import functools
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect

from server.apps.members.logic.session_operations import get_current_member

_View = Callable[..., HttpResponse]


def member_required(view: _View) -> _View:
    """Redirect anonymous sessions to the login page.

    The signed-in member is exposed to the view as ``request.member``.

    Args:
        view: View function to protect.

    Returns:
        Wrapped view.
    """
    @functools.wraps(view)
    def wrapper(request: HttpRequest, *args: object, **kwargs: object) -> HttpResponse:
        member = get_current_member(request)
        if member is None:
            return redirect('members:login')
        request.member = member  # type: ignore[attr-defined]
        return view(request, *args, **kwargs)

    return wrapper
