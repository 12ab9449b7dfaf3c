"""Caching configuration."""

from server.settings.components import config

# Caching
# https://docs.djangoproject.com/en/5.1/topics/cache/

CACHES = {
    'default': {
        'BACKEND': config(
            'DJANGO_CACHE_BACKEND',
            default='django.core.cache.backends.locmem.LocMemCache',
        ),
        'LOCATION': config('DJANGO_CACHE_LOCATION', default='member-drive'),
    },
}
