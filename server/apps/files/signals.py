"""Signals and signal handlers for files app.

``file_uploaded`` and ``file_replaced`` are sent by the file operations
after the storage object and its database record are both in place.
Receivers get the ``File`` instance and must not raise into the sender.
"""

import logging

from django.core.files.storage import default_storage
from django.db.models.signals import post_delete
from django.dispatch import Signal, receiver

from server.apps.files.models import File

logger = logging.getLogger(__name__)

# Sent with: file, folder
file_uploaded = Signal()

# Sent with: file, temporary_file
file_replaced = Signal()


@receiver(post_delete, sender=File)
def delete_file_from_storage(
    sender: type[File],
    instance: File,
    **kwargs: object,
) -> None:
    """Delete file from storage when File record is deleted.

    Args:
        sender: The File model class.
        instance: The File instance being deleted.
        **kwargs: Additional signal arguments.
    """
    if not instance.file:
        return

    storage_name = instance.file.name
    logger.info(
        'Deleting file from storage after DB delete: %s',
        storage_name,
    )

    try:
        if default_storage.exists(storage_name):
            default_storage.delete(storage_name)
            logger.info('File deleted from storage: %s', storage_name)
        else:
            logger.warning(
                'File not found in storage (already deleted?): %s',
                storage_name,
            )
    except Exception:
        # DB delete already succeeded
        logger.exception(
            'Failed to delete file from storage (orphaned): %s',
            storage_name,
        )
