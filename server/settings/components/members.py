"""Identity provider and member directory settings."""

from server.settings.components import config

# Login form scraped for the upstream API token
MEMBERS_LOGIN_URL = config(
    'MEMBERS_LOGIN_URL',
    default='https://auth.aiesec.org/users/sign_in',
)
MEMBERS_TOKEN_COOKIE_DOMAIN = config(
    'MEMBERS_TOKEN_COOKIE_DOMAIN',
    default='experience.aiesec.org',
)
MEMBERS_TOKEN_COOKIE_NAME = config(
    'MEMBERS_TOKEN_COOKIE_NAME',
    default='expa_token',
)

# Member directory API
MEMBERS_DIRECTORY_URL = config(
    'MEMBERS_DIRECTORY_URL',
    default='https://gis-api.aiesec.org/v1/current_person.json',
)

# Only members whose home unit matches may sign in
MEMBERS_ALLOWED_UNIT_ID = config('MEMBERS_ALLOWED_UNIT_ID', cast=int, default=1606)

MEMBERS_HTTP_TIMEOUT = config('MEMBERS_HTTP_TIMEOUT', cast=int, default=30)
MEMBERS_AVATAR_CACHE_TIMEOUT = config(
    'MEMBERS_AVATAR_CACHE_TIMEOUT',
    cast=int,
    default=3600,
)
