"""Template context for the archive navigation bar."""

from django.http import HttpRequest

from server.apps.archive.logic.navigation import get_current_path
from server.apps.archive.path_mapper import PathMapper

_paths = PathMapper()


def navigation(request: HttpRequest) -> dict[str, object]:
    """Expose the current folder and its ancestors to templates."""
    if not hasattr(request, 'session'):
        return {}
    current_path = get_current_path(request.session)
    return {
        'current_path': current_path,
        'breadcrumbs': _paths.breadcrumbs(current_path),
    }
