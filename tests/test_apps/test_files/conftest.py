"""Shared fixtures for files app tests."""

import pytest
from django.core.files.base import ContentFile


@pytest.fixture
def sample_file_content():
    """Sample text file content for testing.

    Returns:
        ContentFile with test data.
    """
    return ContentFile(b'test file content', name='test.txt')
