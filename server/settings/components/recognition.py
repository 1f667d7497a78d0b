"""Image recognition settings.

Empty values are allowed here: the file processor falls back to its own
defaults when ``image_types`` is empty or ``max_file_size`` is zero.
"""

from typing import Any, Final

from server.settings.components import config

IMAGE_RECOGNITION: Final[dict[str, Any]] = {
    # Comma-separated image subtypes, e.g. 'jpg,jpeg,png'
    'image_types': config('IMAGE_RECOGNITION_IMAGE_TYPES', default=''),
    # Upper file size limit in bytes
    'max_file_size': config('IMAGE_RECOGNITION_MAX_FILE_SIZE', default='0'),
    'max_labels': config(
        'IMAGE_RECOGNITION_MAX_LABELS',
        cast=int,
        default=10,
    ),
    'min_confidence': config(
        'IMAGE_RECOGNITION_MIN_CONFIDENCE',
        cast=float,
        default=75.0,
    ),
    'region_name': config(
        'AWS_REKOGNITION_REGION_NAME',
        default='us-east-1',
    ),
}
