"""Database models for files app."""

from pathlib import Path
from typing import Final, final, override

from django.contrib.auth import get_user_model
from django.db import models

User = get_user_model()

# Constants for field max lengths
_MIME_TYPE_MAX_LENGTH: Final = 255
_CHECKSUM_MAX_LENGTH: Final = 64  # SHA256 hex length


@final
class File(models.Model):
    """File stored in S3-compatible storage.

    Each file belongs to a user and has a path in storage following
    the pattern: {user_id}/folder/subfolder/filename.ext

    Uploads and content replacements of this model are announced via
    the ``file_uploaded`` and ``file_replaced`` signals.
    """

    # Owner relationship
    user = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name='files',
        db_index=True,
    )

    # File stored in S3-compatible storage
    # upload_to='' means we control the full path
    file = models.FileField(
        upload_to='',
        help_text='Path in storage: {user_id}/folder/file.ext',
    )

    # File metadata (cached so validation never touches storage)
    size_bytes = models.BigIntegerField(
        help_text='File size in bytes',
    )

    mime_type = models.CharField(
        max_length=_MIME_TYPE_MAX_LENGTH,
        help_text='MIME type guessed from the file extension',
    )

    checksum_sha256 = models.CharField(
        max_length=_CHECKSUM_MAX_LENGTH,
        help_text='SHA256 hash for integrity verification',
        db_index=True,
    )

    # Timestamps
    uploaded_at = models.DateTimeField(auto_now_add=True)
    modified_at = models.DateTimeField(auto_now=True)

    class Meta:
        """Model metadata."""

        verbose_name = 'File'  # type: ignore[mutable-override]
        verbose_name_plural = 'Files'  # type: ignore[mutable-override]
        ordering = ['-uploaded_at']

        indexes = [
            models.Index(
                fields=['user', 'file'],
                name='files_user_file_idx',
            ),
            models.Index(
                fields=['mime_type'],
                name='files_mime_type_idx',
            ),
        ]

        constraints = [
            # Prevent duplicate file paths for the same user
            models.UniqueConstraint(
                fields=['user', 'file'],
                name='files_user_path_unique',
            ),
        ]

    @override
    def __str__(self) -> str:
        """String representation."""
        return f'{self.user.username}:{self.file.name}'

    def get_folder_path(self) -> str:
        """Extract folder path from file.name.

        Example: '123/documents/reports/photo.jpg' -> '123/documents/reports'

        Returns:
            Folder path (parent directory of file).
        """
        return str(Path(self.file.name).parent)

    def get_filename(self) -> str:
        """Extract filename from file.name.

        Example: '123/documents/reports/photo.jpg' -> 'photo.jpg'

        Returns:
            Filename without path.
        """
        return Path(self.file.name).name

    def read_content(self) -> bytes:
        """Read the whole stored object.

        Returns:
            Raw file bytes from the storage backend.
        """
        with self.file.open('rb') as stored:
            return stored.read()
