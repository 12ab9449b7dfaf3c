"""Per-session navigation state.

The current folder lives in the session and scopes listing, upload,
rename, move and removal until the member navigates again. There is no
history: a session is either at the root or at one folder.
"""

import logging
from typing import Final

from django.contrib.sessions.backends.base import SessionBase
from django.http import HttpRequest

from server.apps.archive.exceptions import InvalidPathError
from server.apps.archive.path_mapper import ROOT_PATH, PathMapper

logger = logging.getLogger(__name__)

SESSION_PATH_KEY: Final = 'archive_path'

_SAFE_METHODS: Final = frozenset(('GET', 'HEAD', 'OPTIONS'))

_paths = PathMapper()


def get_current_path(session: SessionBase) -> str:
    """Get the folder the session is looking at.

    Args:
        session: Django session.

    Returns:
        Normalized remote folder path, root by default.
    """
    return session.get(SESSION_PATH_KEY) or ROOT_PATH


def set_current_path(request: HttpRequest, path: str | None) -> str:
    """Move the session to a new folder.

    Safe requests (the navigation link) always go back to the root,
    whatever path they carry. Other requests go to the supplied path.

    Args:
        request: Current request.
        path: Requested folder path.

    Returns:
        The new current path.

    Raises:
        InvalidPathError: If the path fails validation.
    """
    if request.method in _SAFE_METHODS:
        new_path = ROOT_PATH
    else:
        if path and not _paths.validate_path(path):
            raise InvalidPathError(f'Invalid folder path: {path!r}')
        new_path = _paths.normalize(path)

    request.session[SESSION_PATH_KEY] = new_path
    logger.debug('Navigation path set to %s', new_path)
    return new_path
