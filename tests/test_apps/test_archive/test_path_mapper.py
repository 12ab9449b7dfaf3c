"""Tests for archive path mapper."""

import pytest

from server.apps.archive.path_mapper import PathMapper


@pytest.fixture
def mapper():
    """Path mapper under test."""
    return PathMapper()


class TestPathMapperNormalize:
    """Tests for normalize method."""

    @pytest.mark.parametrize(('raw', 'expected'), [
        (None, '/'),
        ('', '/'),
        ('/', '/'),
        ('docs', '/docs'),
        ('/docs/', '/docs'),
        ('//docs//2016/', '/docs/2016'),
    ])
    def test_normalize(self, mapper, raw, expected):
        """Test normalizing supplied paths."""
        assert mapper.normalize(raw) == expected


class TestPathMapperStorageKeys:
    """Tests for conversion between remote paths and storage keys."""

    def test_root_maps_to_empty_key(self, mapper):
        """Test converting root path to storage key."""
        assert mapper.to_storage_key('/') == ''

    def test_nested_path(self, mapper):
        """Test converting nested path."""
        assert mapper.to_storage_key('/docs/report.pdf') == 'docs/report.pdf'

    def test_storage_key_to_remote_path(self, mapper):
        """Test converting storage key back to remote path."""
        assert mapper.to_remote_path('docs/report.pdf') == '/docs/report.pdf'


class TestPathMapperComponents:
    """Tests for parent, name and join helpers."""

    def test_parent_of_root_level_item(self, mapper):
        """Test parent of a root-level file."""
        assert mapper.get_parent_path('/file.txt') == '/'

    def test_parent_of_nested_item(self, mapper):
        """Test parent of a nested file."""
        assert mapper.get_parent_path('/docs/2016/file.txt') == '/docs/2016'

    def test_name(self, mapper):
        """Test extracting the base name."""
        assert mapper.get_name('/docs/file.txt') == 'file.txt'

    def test_name_of_root(self, mapper):
        """Test root has no name."""
        assert mapper.get_name('/') == ''

    def test_join_at_root(self, mapper):
        """Test joining a name to the root."""
        assert mapper.join_paths('/', 'file.txt') == '/file.txt'

    def test_join_nested(self, mapper):
        """Test joining a name to a folder."""
        assert mapper.join_paths('/docs', 'file.txt') == '/docs/file.txt'


class TestPathMapperResolve:
    """Tests for resolving move targets."""

    def test_absolute_target(self, mapper):
        """Test absolute targets are used as is."""
        assert mapper.resolve('/docs', '/archive/2016') == '/archive/2016'

    def test_relative_target(self, mapper):
        """Test relative targets are joined to the current folder."""
        assert mapper.resolve('/docs', 'old') == '/docs/old'

    def test_relative_target_at_root(self, mapper):
        """Test relative targets from the root."""
        assert mapper.resolve('/', 'old/') == '/old'


class TestPathMapperBreadcrumbs:
    """Tests for breadcrumbs method."""

    def test_root_has_no_breadcrumbs(self, mapper):
        """Test root folder."""
        assert mapper.breadcrumbs('/') == []

    def test_nested_folder(self, mapper):
        """Test every ancestor is listed outermost first."""
        assert mapper.breadcrumbs('/a/b/c') == ['/a', '/a/b', '/a/b/c']


class TestPathMapperValidation:
    """Tests for path validation."""

    def test_valid_path(self, mapper):
        """Test valid paths pass validation."""
        assert mapper.validate_path('/docs/2016/report.pdf')

    def test_dots_inside_names_allowed(self, mapper):
        """Test names containing dots are not traversal."""
        assert mapper.validate_path('/docs/..hidden/file..txt')

    def test_path_traversal_rejected(self, mapper):
        """Test path traversal is rejected."""
        assert not mapper.validate_path('/docs/../../etc/passwd')

    def test_null_byte_rejected(self, mapper):
        """Test null bytes are rejected."""
        assert not mapper.validate_path('/file\x00.txt')

    def test_is_root(self, mapper):
        """Test root detection."""
        assert mapper.is_root('/')
        assert mapper.is_root('')
        assert not mapper.is_root('/docs')
