"""Business logic for file operations."""

import logging
from typing import TYPE_CHECKING, BinaryIO

from django.contrib.auth import get_user_model
from django.core.files.base import File as DjangoFile
from django.core.files.storage import default_storage
from django.db import transaction

from server.apps.files.infrastructure.metadata import (
    calculate_checksum,
    detect_mime_type,
    extract_filename,
    validate_storage_path,
)
from server.apps.files.models import File
from server.apps.files.signals import file_replaced, file_uploaded

if TYPE_CHECKING:
    from server.apps.files.infrastructure.storage import FileStorage

User = get_user_model()
logger = logging.getLogger(__name__)


def _get_storage() -> 'FileStorage':
    """Get the configured default storage backend.

    Returns:
        FileStorage instance with proper S3 configuration.
    """
    return default_storage  # type: ignore[return-value]


def upload_file(
    user: User,
    storage_path: str,
    file_obj: BinaryIO | DjangoFile,
) -> File:
    """Upload file to storage, create database record, announce upload.

    Transaction safety: Upload to storage first, then create DB record.
    If DB transaction fails, the uploaded file is deleted from storage
    (rollback) and no signal is sent.

    Args:
        user: Owner of the file.
        storage_path: Full storage path ({user_id}/folder/file.ext).
        file_obj: File-like object to upload.

    Returns:
        Created File instance.

    Raises:
        ValidationError: If storage path validation fails.
        Exception: If upload or DB operation fails.
    """
    # Validate storage path follows user isolation rules
    validate_storage_path(user.id, storage_path)

    filename = extract_filename(storage_path)

    logger.info('Calculating metadata for file: %s', storage_path)
    checksum = calculate_checksum(file_obj)
    mime_type = detect_mime_type(file_obj, filename)
    file_size = _get_file_size(file_obj)

    storage = _get_storage()

    # Step 1: Upload to storage first
    try:
        logger.info('Uploading file to storage: %s', storage_path)
        saved_name = storage.save(storage_path, file_obj)
        logger.info('File uploaded successfully: %s', saved_name)
    except Exception:
        logger.exception('Failed to upload file to storage: %s', storage_path)
        raise

    # Step 2: Create database record (in transaction)
    try:
        with transaction.atomic():
            file_instance = File.objects.create(
                user=user,
                file=saved_name,  # Use actual saved name from storage
                size_bytes=file_size,
                mime_type=mime_type,
                checksum_sha256=checksum,
            )
            logger.info(
                'File record created in database: %s (ID: %d)',
                saved_name,
                file_instance.id,
            )
    except Exception:
        logger.exception(
            'Database transaction failed, rolling back storage upload: %s',
            saved_name,
        )
        storage.rollback_upload(saved_name)
        raise

    # Step 3: Announce the upload, receivers never fail the upload
    file_uploaded.send_robust(
        sender=File,
        file=file_instance,
        folder=file_instance.get_folder_path(),
    )
    return file_instance


def update_file_content(
    file_id: int,
    file_obj: BinaryIO | DjangoFile,
) -> File:
    """Replace file content atomically and announce the replacement.

    Transaction safety: Upload new content to a temporary path first,
    then copy it over the original object and update the DB record.
    If the copy fails, the temporary upload is deleted (rollback) and
    the original content stays intact.

    Args:
        file_id: ID of file to update.
        file_obj: New file content.

    Returns:
        Updated File instance.

    Raises:
        File.DoesNotExist: If file not found.
        Exception: If upload or DB operation fails.
    """
    file_instance = File.objects.get(id=file_id)
    old_storage_path = file_instance.file.name
    storage = _get_storage()

    # Mime type follows the stored name, not the uploaded one
    filename = extract_filename(old_storage_path)
    checksum = calculate_checksum(file_obj)
    mime_type = detect_mime_type(file_obj, filename)
    file_size = _get_file_size(file_obj)

    logger.info('Updating file content: %s (ID: %d)', old_storage_path, file_id)

    temporary_path = _upload_and_update_file(
        file_instance,
        storage,
        old_storage_path,
        file_size,
        mime_type,
        checksum,
        file_obj,
    )

    file_replaced.send_robust(
        sender=File,
        file=file_instance,
        temporary_file=temporary_path,
    )
    return file_instance


def delete_file(file_id: int) -> None:
    """Delete file from database and storage.

    Storage deletion is handled by the post_delete signal handler
    in signals.py. Recognition labels cascade with the record.

    Args:
        file_id: ID of file to delete.

    Raises:
        File.DoesNotExist: If file doesn't exist.
        Exception: If DB deletion fails.
    """
    try:
        file_instance = File.objects.get(id=file_id)
    except File.DoesNotExist:
        logger.exception('File not found: ID=%d', file_id)
        raise

    logger.info(
        'Deleting file: ID=%d, path=%s',
        file_id,
        file_instance.file.name,
    )

    try:
        with transaction.atomic():
            file_instance.delete()
            logger.info('File record deleted from database: ID=%d', file_id)
    except Exception:
        logger.exception('Failed to delete file from database: ID=%d', file_id)
        raise


def _get_file_size(file_obj: BinaryIO | DjangoFile) -> int:
    """Get file size from file object.

    Args:
        file_obj: File-like object.

    Returns:
        File size in bytes.
    """
    if hasattr(file_obj, 'size'):
        return file_obj.size
    file_size = len(file_obj.read())
    file_obj.seek(0)
    return file_size


def _upload_and_update_file(  # noqa: WPS211
    file_instance: File,
    storage: 'FileStorage',
    old_storage_path: str,
    file_size: int,
    mime_type: str,
    checksum: str,
    file_obj: BinaryIO | DjangoFile,
) -> str:
    """Upload new content and swap it in under the original path.

    The storage path of the record never changes, so the mime type of
    later replacements is still derived from the original extension.

    Args:
        file_instance: File model instance to update.
        storage: Storage backend.
        old_storage_path: Current storage path.
        file_size: New file size.
        mime_type: New MIME type.
        checksum: New checksum.
        file_obj: New file content.

    Returns:
        Temporary storage path the new content was uploaded to.
    """
    temp_storage_path = f'{old_storage_path}.tmp'

    # Step 1: Upload new content to temporary path
    try:
        logger.debug('Uploading to temp path: %s', temp_storage_path)
        saved_name = storage.save(temp_storage_path, file_obj)
    except Exception:
        logger.exception('Failed to upload: %s', temp_storage_path)
        raise

    # Step 2: Overwrite the original object with the new content
    try:
        storage.move_object(saved_name, old_storage_path)
    except Exception:
        logger.exception('Failed to swap content into: %s', old_storage_path)
        storage.rollback_upload(saved_name)
        raise

    # Step 3: Update database record atomically
    try:
        with transaction.atomic():
            file_instance.size_bytes = file_size
            file_instance.mime_type = mime_type
            file_instance.checksum_sha256 = checksum
            file_instance.save(update_fields=[
                'size_bytes',
                'mime_type',
                'checksum_sha256',
                'modified_at',
            ])
    except Exception:
        logger.exception(
            'DB update failed after content swap: %s',
            old_storage_path,
        )
        raise

    return saved_name
