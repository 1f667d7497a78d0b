"""Metadata extraction utilities for files."""

import hashlib
import mimetypes
from pathlib import Path
from typing import BinaryIO, Final

from django.core.exceptions import ValidationError

_CHUNK_SIZE: Final = 8192  # 8KB chunks for checksum calculation
_FALLBACK_MIME_TYPE: Final = 'application/octet-stream'


def detect_mime_type(file_obj: BinaryIO, filename: str) -> str:
    """Detect MIME type from the filename extension.

    The result is what the recognition hook validates against its
    allow-list, so 'photo.jpg' and 'photo.jpeg' both give 'image/jpeg'.

    Args:
        file_obj: File-like object (not used in basic implementation).
        filename: Filename with extension.

    Returns:
        MIME type string (e.g., 'image/jpeg', 'image/png').
        Returns 'application/octet-stream' if type cannot be determined.
    """
    mime_type, _ = mimetypes.guess_type(filename)
    if mime_type is None:
        return _FALLBACK_MIME_TYPE
    return mime_type


def calculate_checksum(file_obj: BinaryIO) -> str:
    """Calculate SHA256 checksum of file.

    Resets file pointer to beginning before and after calculation.

    Args:
        file_obj: File-like object to checksum.

    Returns:
        Hex-encoded SHA256 hash string.
    """
    sha256_hash = hashlib.sha256()

    file_obj.seek(0)
    for chunk in iter(lambda: file_obj.read(_CHUNK_SIZE), b''):
        sha256_hash.update(chunk)
    file_obj.seek(0)

    return sha256_hash.hexdigest()


def extract_filename(storage_path: str) -> str:
    """Extract filename from storage path.

    Args:
        storage_path: Full path (e.g., '123/photos/cat.png').

    Returns:
        Filename (e.g., 'cat.png').
    """
    return Path(storage_path).name


def validate_storage_path(user_id: int, storage_path: str) -> None:
    """Validate storage path follows user isolation rules.

    Args:
        user_id: Owner's user ID.
        storage_path: Proposed storage path.

    Raises:
        ValidationError: If path doesn't start with user_id or is invalid.
    """
    if not storage_path:
        raise ValidationError('Storage path cannot be empty')

    path_parts = Path(storage_path).parts
    if not path_parts:
        raise ValidationError('Storage path must have at least one component')

    try:
        path_user_id = int(path_parts[0])
    except ValueError as error:
        raise ValidationError(
            'Storage path must start with user ID',
        ) from error

    if path_user_id != user_id:
        raise ValidationError(
            f'Storage path user ID ({path_user_id}) does not match '
            f'owner ({user_id})',
        )
