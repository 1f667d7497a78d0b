"""Custom storage backend for S3-compatible storage."""

import logging
from typing import Any, final, override

from storages.backends.s3 import S3Storage

logger = logging.getLogger(__name__)


@final
class FileStorage(S3Storage):
    """Custom S3 storage backend for uploaded files.

    Extends django-storages S3Storage with:
    - Rollback of uploads whose DB record could not be written
    - Server-side move used when file content is replaced
    - Logging of every write and delete
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
            name: Storage path for the file.
            content: File content (file-like object).
            max_length: Optional maximum length for the filename.

        Returns:
            Actual storage path used (may differ from name if conflicts).
        """
        try:
            logger.info('Uploading file to storage: %s', name)
            saved_name = super().save(name, content, max_length)
        except Exception:
            logger.exception('Failed to upload file to storage: %s', name)
            raise
        logger.info('Successfully uploaded file: %s', saved_name)
        return saved_name

    @override
    def delete(self, name: str) -> None:
        """Delete file from S3 with error handling and logging.

        Args:
            name: Storage path of file to delete.
        """
        try:
            logger.info('Deleting file from storage: %s', name)
            super().delete(name)
        except Exception:
            logger.exception('Failed to delete file from storage: %s', name)
            raise
        logger.info('Successfully deleted file: %s', name)

    def rollback_upload(self, name: str) -> None:
        """Delete an uploaded object after a failed follow-up step.

        Best effort: a failed delete is logged and the object is left
        orphaned in the bucket.

        Args:
            name: Storage path of file to delete.
        """
        try:
            logger.warning('Rolling back upload, deleting file: %s', name)
            self.delete(name)
        except Exception:
            logger.exception(
                'Failed to rollback upload, orphaned file: %s',
                name,
            )

    def move_object(self, source: str, destination: str) -> None:
        """Move an object in S3 storage, overwriting the destination.

        S3 has no native rename, so this is a server-side copy followed
        by deletion of the source. Not atomic: if the delete fails the
        source stays behind as an orphan.

        Args:
            source: Source storage path.
            destination: Destination storage path.
        """
        try:
            logger.info('Moving file: %s -> %s', source, destination)
            copy_source = {
                'Bucket': self.bucket_name,
                'Key': source,
            }
            self.bucket.copy(copy_source, destination)
            self.delete(source)
        except Exception:
            logger.exception('Move failed: %s -> %s', source, destination)
            raise
        logger.info('Moved file: %s -> %s', source, destination)
