"""Database models for members app."""

from typing import Final, final, override

from django.db import models

# Constants for field max lengths
_DISPLAY_NAME_MAX_LENGTH: Final = 255
_AVATAR_URL_MAX_LENGTH: Final = 500
_GROUP_MAX_LENGTH: Final = 64
_POSITION_MAX_LENGTH: Final = 128


@final
class Member(models.Model):
    """Local account of a member signed in through the identity provider.

    Created on the first successful login of an unseen e-mail address and
    never deleted by the application. Passwords are never stored here:
    the identity provider owns the credentials.
    """

    display_name = models.CharField(max_length=_DISPLAY_NAME_MAX_LENGTH)

    email = models.EmailField(unique=True)

    avatar_url = models.URLField(
        max_length=_AVATAR_URL_MAX_LENGTH,
        blank=True,
        default='',
    )

    group_affiliation = models.CharField(
        max_length=_GROUP_MAX_LENGTH,
        blank=True,
        default='',
        help_text='Home sub-unit id from the member directory',
    )

    position = models.CharField(
        max_length=_POSITION_MAX_LENGTH,
        blank=True,
        default='',
        help_text='Team type of the current position',
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Model metadata."""

        verbose_name = 'Member'  # type: ignore[mutable-override]
        verbose_name_plural = 'Members'  # type: ignore[mutable-override]
        ordering = ['display_name']

    @override
    def __str__(self) -> str:
        """String representation."""
        return f'{self.display_name} <{self.email}>'
