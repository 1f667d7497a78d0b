"""Input policy for images sent to recognition."""

from collections.abc import Collection
from typing import Final

_IMAGE_MIME_GROUP: Final = 'image'


def split_mime_type(mime_type: str | None) -> list[str]:
    """Split a mime type into its '/'-separated parts.

    Args:
        mime_type: Mime type string such as 'image/png'.

    Returns:
        Parts of the mime type, empty for a missing value.
    """
    if not mime_type:
        return []
    return mime_type.split('/')


def is_valid_mime_type(
    mime_type: str | None,
    image_types: Collection[str],
) -> bool:
    """Check that a mime type names an allowed image subtype.

    Args:
        mime_type: Mime type of the uploaded file.
        image_types: Allowed subtypes, e.g. ['jpg', 'jpeg', 'png'].

    Returns:
        True for 'image/<subtype>' with subtype in image_types.
    """
    parts = split_mime_type(mime_type)
    if len(parts) != 2:
        return False
    group, subtype = parts
    return group == _IMAGE_MIME_GROUP and subtype in image_types


def is_valid_file_size(size: int | None, max_file_size: int) -> bool:
    """Check that a file is not empty and not above the ceiling.

    Args:
        size: File size in bytes.
        max_file_size: Largest accepted size in bytes.

    Returns:
        True when 0 < size <= max_file_size.
    """
    if size is None:
        return False
    return 0 < size <= max_file_size
