"""Template filters for archive listings."""

from pathlib import PurePosixPath
from typing import Final

from django import template

register = template.Library()

_UNITS: Final = (
    (1024 ** 3, 'GB'),
    (1024 ** 2, 'MB'),
    (1024, 'KB'),
)


@register.filter
def format_size(size_bytes: int | None) -> str:
    """Format bytes with the largest whole unit.

    Example: 5 * 1024 * 1024 + 10 -> '5 MB'

    Args:
        size_bytes: Size in bytes.

    Returns:
        Size in whole GB, MB, KB or Bytes.
    """
    size_bytes = size_bytes or 0
    for factor, unit in _UNITS:
        if size_bytes >= factor:
            return f'{size_bytes // factor} {unit}'
    return f'{size_bytes} Bytes'


@register.filter
def file_type(name: str) -> str:
    """Upper-case extension of a file name, for the type column.

    Args:
        name: File name.

    Returns:
        Extension without dot (e.g., 'PDF'), or 'no ext.'.
    """
    if '.' not in name:
        return 'no ext.'
    return name.rsplit('.', 1)[-1].upper()


@register.filter
def folder_name(remote_path: str) -> str:
    """Last segment of a folder path, for breadcrumbs."""
    return PurePosixPath(remote_path).name or '/'
