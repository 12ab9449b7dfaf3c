"""Django app configuration for archive app."""

from django.apps import AppConfig


class ArchiveConfig(AppConfig):
    """Configuration for archive app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'server.apps.archive'
    verbose_name = 'Archive'
