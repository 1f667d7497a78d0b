"""Tests for the image input policy."""

import pytest

from server.apps.recognition.logic.validation import (
    is_valid_file_size,
    is_valid_mime_type,
    split_mime_type,
)

_DEFAULT_TYPES = ('jpg', 'jpeg', 'png')


@pytest.mark.parametrize('mime_type', [
    'image/jpeg',
    'image/png',
    'image/jpg',
])
def test_allowed_mime_types(mime_type):
    """Test image subtypes from the allow-list pass."""
    assert is_valid_mime_type(mime_type, _DEFAULT_TYPES)


@pytest.mark.parametrize('mime_type', [
    'image/gif',
    'image/svg+xml',
    'text/plain',
    'application/png',
    'IMAGE/png',
])
def test_rejected_mime_types(mime_type):
    """Test types outside the allow-list or group fail."""
    assert not is_valid_mime_type(mime_type, _DEFAULT_TYPES)


@pytest.mark.parametrize('mime_type', [
    '',
    None,
    'image',
    'image/png/extra',
    'png',
])
def test_malformed_mime_types(mime_type):
    """Test mime strings without exactly two parts fail."""
    assert not is_valid_mime_type(mime_type, _DEFAULT_TYPES)


def test_split_mime_type():
    """Test mime type splitting."""
    assert split_mime_type('image/png') == ['image', 'png']
    assert split_mime_type(None) == []


@pytest.mark.parametrize(('size', 'expected'), [
    (1, True),
    (2047999, True),
    (2048000, True),
    (2048001, False),
    (0, False),
    (-1, False),
    (None, False),
])
def test_file_size_bounds(size, expected):
    """Test size must be positive and at most the ceiling."""
    assert is_valid_file_size(size, 2048000) is expected
