"""Tests for per-session navigation state."""

import pytest
from django.contrib.sessions.backends.db import SessionStore

from server.apps.archive.exceptions import InvalidPathError
from server.apps.archive.logic.navigation import (
    SESSION_PATH_KEY,
    get_current_path,
    set_current_path,
)


@pytest.fixture
def make_request(rf):
    """Build requests carrying an in-memory session."""
    def factory(method, data=None):
        request = getattr(rf, method.lower())('/authentication/navigation_params', data or {})
        request.session = SessionStore()
        return request
    return factory


class TestCurrentPath:
    """Tests for reading the current folder."""

    def test_defaults_to_root(self):
        """Test fresh sessions are at the root."""
        assert get_current_path(SessionStore()) == '/'

    def test_reads_session(self):
        """Test stored path is returned."""
        session = SessionStore()
        session[SESSION_PATH_KEY] = '/docs'

        assert get_current_path(session) == '/docs'


class TestSetCurrentPath:
    """Tests for changing the current folder."""

    def test_get_resets_to_root(self, make_request):
        """Test safe requests go to the root whatever they carry."""
        request = make_request('GET', {'path': '/docs'})
        request.session[SESSION_PATH_KEY] = '/elsewhere'

        assert set_current_path(request, '/docs') == '/'
        assert request.session[SESSION_PATH_KEY] == '/'

    def test_post_sets_path(self, make_request):
        """Test unsafe requests store the normalized path."""
        request = make_request('POST')

        assert set_current_path(request, 'docs/2016/') == '/docs/2016'
        assert get_current_path(request.session) == '/docs/2016'

    def test_post_without_path(self, make_request):
        """Test a missing path means the root."""
        request = make_request('POST')

        assert set_current_path(request, None) == '/'

    def test_post_rejects_traversal(self, make_request):
        """Test invalid paths leave the session unchanged."""
        request = make_request('POST')
        request.session[SESSION_PATH_KEY] = '/docs'

        with pytest.raises(InvalidPathError):
            set_current_path(request, '/docs/../..')

        assert get_current_path(request.session) == '/docs'
