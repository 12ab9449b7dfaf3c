"""Shared fixtures for archive app tests."""

import boto3
import pytest
from django.conf import settings
from django.core.files.base import ContentFile
from django.core.files.storage import storages
from moto import mock_aws

from server.apps.archive.infrastructure.remote import RemoteStorage
from server.apps.archive.logic.context import ArchiveContext

_BUCKET = 'member-drive'


@pytest.fixture
def mock_s3():
    """Mock S3 service with member-drive bucket.

    Yields:
        boto3 S3 resource with member-drive bucket created.
    """
    with mock_aws():
        # Create S3 resource
        conn = boto3.resource('s3', region_name='us-east-1')

        # Create bucket
        conn.create_bucket(Bucket=_BUCKET)

        yield conn


@pytest.fixture
def bucket(mock_s3):
    """Mocked member-drive bucket.

    Returns:
        boto3 Bucket resource.
    """
    return mock_s3.Bucket(_BUCKET)


@pytest.fixture
def file_storage(mock_s3):
    """Fresh storage backend bound to the mocked bucket.

    Returns:
        FileStorage built from the default storage settings.
    """
    return storages.create_storage(settings.STORAGES['default'])


@pytest.fixture
def remote_storage(file_storage):
    """Remote storage provider over the mocked bucket.

    Returns:
        RemoteStorage instance.
    """
    return RemoteStorage(file_storage)


@pytest.fixture
def root_context(remote_storage):
    """Archive context at the root folder.

    Returns:
        ArchiveContext for '/'.
    """
    return ArchiveContext(storage=remote_storage, path='/')


@pytest.fixture
def docs_context(remote_storage):
    """Archive context at /docs.

    Returns:
        ArchiveContext for '/docs'.
    """
    return ArchiveContext(storage=remote_storage, path='/docs')


@pytest.fixture
def use_remote_storage(monkeypatch, remote_storage):
    """Make views and commands use the mocked remote storage.

    Returns:
        The RemoteStorage the views will use.
    """
    monkeypatch.setattr(
        'server.apps.archive.logic.context.get_remote_storage',
        lambda: remote_storage,
    )
    monkeypatch.setattr(
        'server.apps.archive.management.commands.reconcile_archive.get_remote_storage',
        lambda: remote_storage,
    )
    return remote_storage


@pytest.fixture
def sample_file_content():
    """Sample file content for testing.

    Returns:
        ContentFile with test data.
    """
    return ContentFile(b'test file content', name='test.txt')
