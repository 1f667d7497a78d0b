"""Access to the ``IMAGE_RECOGNITION`` settings.

Every reader falls back to a default when the configured value is empty
or unusable, so a missing environment variable never disables the hook.
"""

import re
from typing import Any, Final

from django.conf import settings

DEFAULT_IMAGE_TYPES: Final = 'jpg,jpeg,png'
DEFAULT_MAX_FILE_SIZE: Final = 2048000
DEFAULT_MAX_LABELS: Final = 10
DEFAULT_MIN_CONFIDENCE: Final = 75.0
DEFAULT_REGION_NAME: Final = 'us-east-1'

_NOT_TYPE_LIST_CHARS: Final = re.compile('[^a-z,]')


def get_configuration_value(key: str) -> Any:
    """Return one value of the ``IMAGE_RECOGNITION`` settings dict.

    Args:
        key: Configuration key, e.g. 'image_types'.

    Returns:
        Configured value, or None when the key or the dict is missing.
    """
    configuration = getattr(settings, 'IMAGE_RECOGNITION', None) or {}
    return configuration.get(key)


def get_image_types() -> list[str]:
    """Return the allowed image subtypes.

    The raw value is trimmed, lowercased and stripped of everything but
    ``a-z`` and commas before it is split, so ' JPG, Png ' gives
    ['jpg', 'png'].

    Returns:
        List of allowed subtypes, from configuration or the default.
    """
    image_types = get_configuration_value('image_types')
    if not image_types:
        image_types = DEFAULT_IMAGE_TYPES

    cleaned = _NOT_TYPE_LIST_CHARS.sub('', str(image_types).strip().lower())
    return [image_type for image_type in cleaned.split(',') if image_type]


def get_max_file_size() -> int:
    """Return the file size ceiling in bytes.

    Missing, non-numeric and non-positive values fall back to the default.

    Returns:
        Maximum accepted file size in bytes.
    """
    max_file_size = _as_number(get_configuration_value('max_file_size'), int)
    if not max_file_size or max_file_size <= 0:
        return DEFAULT_MAX_FILE_SIZE
    return max_file_size


def get_max_labels() -> int:
    """Return how many labels to request per image."""
    max_labels = _as_number(get_configuration_value('max_labels'), int)
    if not max_labels or max_labels <= 0:
        return DEFAULT_MAX_LABELS
    return max_labels


def get_min_confidence() -> float:
    """Return the minimum label confidence in percent."""
    min_confidence = _as_number(
        get_configuration_value('min_confidence'),
        float,
    )
    if min_confidence is None or not 0 <= min_confidence <= 100:
        return DEFAULT_MIN_CONFIDENCE
    return min_confidence


def get_region_name() -> str:
    """Return the AWS region of the Rekognition endpoint."""
    return get_configuration_value('region_name') or DEFAULT_REGION_NAME


def _as_number(raw_value: Any, cast: type[int] | type[float]) -> Any:
    """Convert a configured value to a number.

    Args:
        raw_value: Value from the settings dict, usually a string.
        cast: Number type to convert to, int or float.

    Returns:
        Converted number, or None for missing, boolean and
        non-numeric values.
    """
    if raw_value is None or isinstance(raw_value, bool):
        return None
    try:
        return cast(str(raw_value).strip())
    except ValueError:
        return None
