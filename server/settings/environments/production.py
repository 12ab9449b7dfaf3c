"""
This file contains all the settings used in production.

This file is required and if development.py is present these
values are overridden.
"""

from server.settings.components import config

# Production flags:
# https://docs.djangoproject.com/en/5.1/howto/deployment/

DEBUG = False

ALLOWED_HOSTS = [
    # We use `DOMAIN_NAME` variable to allow subdomains:
    config('DOMAIN_NAME'),
]

# Security
# https://docs.djangoproject.com/en/5.1/topics/security/

SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

SECURE_SSL_REDIRECT = config('DJANGO_SECURE_SSL_REDIRECT', cast=bool, default=True)

SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
