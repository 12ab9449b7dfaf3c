"""Custom storage backend for S3-compatible storage."""

import logging
from typing import Any, final, override

from storages.backends.s3 import S3Storage
from storages.utils import clean_name

logger = logging.getLogger(__name__)


@final
class FileStorage(S3Storage):
    """Custom S3 storage backend for the archive bucket.

    Extends django-storages S3Storage with:
    - Transaction rollback support for failed DB operations
    - Enhanced error logging
    - Folder listing with object metadata
    - Server-side move of single objects and whole prefixes
    """

    @override
    def save(  # noqa: WPS211
        self,
        name: str,
        content: Any,
        max_length: int | None = None,
    ) -> str:
        """Save file to S3 with error handling and logging.

        Args:
            name: Storage key for the file.
            content: File content (file-like object).
            max_length: Optional maximum length for the filename.

        Returns:
            Actual storage key used (may differ from name if conflicts).

        Raises:
            Exception: If S3 upload fails.
        """
        try:
            logger.info('Uploading file to storage: %s', name)
            saved_name = super().save(name, content, max_length)
            logger.info('Successfully uploaded file: %s', saved_name)
        except Exception:
            logger.exception('Failed to upload file to storage: %s', name)
            raise
        else:
            return saved_name

    @override
    def delete(self, name: str) -> None:
        """Delete file from S3 with error handling and logging.

        Args:
            name: Storage key of file to delete.

        Raises:
            Exception: If S3 delete fails.
        """
        try:
            logger.info('Deleting file from storage: %s', name)
            super().delete(name)
            logger.info('Successfully deleted file: %s', name)
        except Exception:
            logger.exception('Failed to delete file from storage: %s', name)
            raise

    def rollback_upload(self, name: str) -> None:
        """Delete uploaded file for DB transaction rollback.

        This is a best-effort operation - if deletion fails, the error
        is logged but not raised, as the DB rollback has already occurred.

        Args:
            name: Storage key of file to delete.
        """
        try:
            logger.warning('Rolling back upload, deleting file: %s', name)
            self.delete(name)
            logger.info('Successfully rolled back file upload: %s', name)
        except Exception:
            # The object stays in the bucket; the next reconcile mirrors it
            logger.exception(
                'Failed to rollback upload, orphaned file: %s',
                name,
            )

    def list_folder(
        self,
        name: str,
    ) -> tuple[list[str], list[dict[str, Any]]]:
        """List one level of a folder with object metadata.

        Args:
            name: Folder key ('' for the bucket root).

        Returns:
            Tuple of (sub-folder names, object summaries). Object summaries
            are the raw ``Contents`` items of ``list_objects_v2`` with the
            ``Key`` made relative to the folder.
        """
        path = self._normalize_name(clean_name(name))
        # The path needs to end with a slash, but if the root is empty, leave it.
        if path and not path.endswith('/'):
            path += '/'

        folders: list[str] = []
        objects: list[dict[str, Any]] = []
        paginator = self.connection.meta.client.get_paginator('list_objects_v2')
        pages = paginator.paginate(
            Bucket=self.bucket_name,
            Delimiter='/',
            Prefix=path,
        )
        for page in pages:
            for common_prefix in page.get('CommonPrefixes', ()):
                folders.append(
                    common_prefix['Prefix'][len(path):].rstrip('/'),
                )
            for summary in page.get('Contents', ()):
                relative_key = summary['Key'][len(path):]
                # Skip folder marker objects ('docs/')
                if not relative_key or relative_key.endswith('/'):
                    continue
                objects.append({**summary, 'Key': relative_key})

        logger.debug(
            'Listed %s: %d folders, %d objects',
            path or '/',
            len(folders),
            len(objects),
        )
        return folders, objects

    def has_prefix(self, name: str) -> bool:
        """Check if any object lives under a folder key.

        Args:
            name: Folder key.

        Returns:
            True if the folder has at least one object.
        """
        prefix = self._normalize_name(clean_name(name)).rstrip('/') + '/'
        response = self.connection.meta.client.list_objects_v2(
            Bucket=self.bucket_name,
            Prefix=prefix,
            MaxKeys=1,
        )
        return response.get('KeyCount', 0) > 0

    def move_object(self, source: str, destination: str) -> None:
        """Move/rename an object in S3 storage.

        S3 doesn't support native rename, so this performs a server-side
        copy followed by deletion of the source.

        Note: This operation is not atomic. If copy succeeds but delete
        fails, both objects will exist and the source becomes orphaned.

        Args:
            source: Source storage key.
            destination: Destination storage key.

        Raises:
            Exception: If copy or delete fails.
        """
        try:
            logger.info('Moving file: %s -> %s', source, destination)
            # Server-side copy using boto3
            copy_source = {
                'Bucket': self.bucket_name,
                'Key': self._normalize_name(clean_name(source)),
            }
            self.bucket.copy(
                copy_source,
                self._normalize_name(clean_name(destination)),
            )
            # Delete source after successful copy
            self.delete(source)
            logger.info('Moved file: %s -> %s', source, destination)
        except Exception:
            logger.exception('Move failed: %s -> %s', source, destination)
            raise

    def move_prefix(self, source: str, destination: str) -> int:
        """Move every object under a folder key to a new folder key.

        Args:
            source: Source folder key.
            destination: Destination folder key.

        Returns:
            Number of objects moved.
        """
        source_prefix = clean_name(source).rstrip('/') + '/'
        destination_prefix = clean_name(destination).rstrip('/') + '/'
        normalized_prefix = self._normalize_name(source_prefix)

        paginator = self.connection.meta.client.get_paginator('list_objects_v2')
        pages = paginator.paginate(
            Bucket=self.bucket_name,
            Prefix=normalized_prefix,
        )
        keys = [
            summary['Key'][len(normalized_prefix):]
            for page in pages
            for summary in page.get('Contents', ())
        ]

        for relative_key in keys:
            self.move_object(
                source_prefix + relative_key,
                destination_prefix + relative_key,
            )

        logger.info(
            'Moved %d objects from %s to %s',
            len(keys),
            source_prefix,
            destination_prefix,
        )
        return len(keys)
