"""File processor hooked into the upload and replace signals of files app.

Uploaded images that pass the type and size policy are sent to Amazon
Rekognition. Everything else is logged and skipped.
"""

import logging

from django.dispatch import receiver

from server.apps.files.models import File
from server.apps.files.signals import file_replaced, file_uploaded
from server.apps.recognition.configuration import (
    get_image_types,
    get_max_file_size,
)
from server.apps.recognition.infrastructure.rekognition import (
    AmazonRekognition,
)
from server.apps.recognition.logic.validation import (
    is_valid_file_size,
    is_valid_mime_type,
)

logger = logging.getLogger(__name__)


class FileProcessor:
    """Validate uploaded files and forward images to recognition."""

    def __init__(self, recognition: AmazonRekognition | None = None) -> None:
        """Initialize the processor.

        Args:
            recognition: Recognition client. When omitted, an
                AmazonRekognition client is created on first use, so
                rejected files never build one.
        """
        self._recognition = recognition

    @property
    def recognition(self) -> AmazonRekognition:
        """Recognition client, created on first access."""
        if self._recognition is None:
            self._recognition = AmazonRekognition()
        return self._recognition

    def process_file(self, file: File, folder: str | None = None) -> bool:
        """Process a file uploaded to storage.

        Args:
            file: Uploaded file.
            folder: Folder the file was uploaded into (unused).

        Returns:
            True if the file was sent to recognition.
        """
        logger.info('Processing uploaded file: ID=%d', file.id)
        self.log_file_details(file)
        if not self.is_valid_image(file):
            return False
        self.recognition.process_image(file)
        return True

    def process_replace_file(
        self,
        file: File,
        temporary_file: str | None = None,
    ) -> bool:
        """Process a file whose content was replaced.

        Args:
            file: File with the new content already in place.
            temporary_file: Storage path the new content was uploaded to.

        Returns:
            True if the file was sent to recognition.
        """
        logger.info(
            'Processing replaced file: ID=%d (uploaded as %s)',
            file.id,
            temporary_file,
        )
        return self.process_file(file, None)

    def log_file_details(self, file: File) -> None:
        """Write the metadata of a processed file to the log."""
        logger.info('File ID: %d', file.id)
        logger.info('File name: %s', file.get_filename())
        logger.info('Storage path: %s', file.file.name)
        logger.info('File mime type: %s', file.mime_type)
        logger.info('File size: %d', file.size_bytes)

    def is_valid_image(self, file: File) -> bool:
        """Check a file against the configured type and size policy.

        Args:
            file: File to check.

        Returns:
            True if the file should be sent to recognition.
        """
        if not is_valid_mime_type(file.mime_type, get_image_types()):
            logger.info('Invalid image type: %s', file.mime_type)
            return False

        if not is_valid_file_size(file.size_bytes, get_max_file_size()):
            logger.info('Invalid file size: %d bytes', file.size_bytes)
            return False

        return True


@receiver(file_uploaded, dispatch_uid='recognition_process_file')
def on_file_uploaded(
    sender: type[File],
    file: File,
    folder: str | None = None,
    **kwargs: object,
) -> None:
    """Run the file processor for a new upload."""
    FileProcessor().process_file(file, folder)


@receiver(file_replaced, dispatch_uid='recognition_process_replace_file')
def on_file_replaced(
    sender: type[File],
    file: File,
    temporary_file: str | None = None,
    **kwargs: object,
) -> None:
    """Run the file processor for replaced content."""
    FileProcessor().process_replace_file(file, temporary_file)
