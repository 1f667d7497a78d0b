"""Tests for File model."""

import pytest
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage

from server.apps.files.models import File


def _create_file(user, path, mime_type='image/png'):
    return File.objects.create(
        user=user,
        file=path,
        size_bytes=100,
        mime_type=mime_type,
        checksum_sha256='abcd' * 16,
    )


@pytest.mark.django_db
def test_file_model_str(user, mock_s3):
    """Test File __str__ method."""
    file_instance = _create_file(user, '1/cat.png')

    assert str(file_instance) == f'{user.username}:1/cat.png'


@pytest.mark.django_db
def test_file_path_helpers(user, mock_s3):
    """Test filename and folder helpers."""
    file_instance = _create_file(user, '1/photos/2024/Beach.JPG', 'image/jpeg')

    assert file_instance.get_filename() == 'Beach.JPG'
    assert file_instance.get_folder_path() == '1/photos/2024'


@pytest.mark.django_db
def test_file_read_content(user, mock_s3):
    """Test reading stored bytes through the storage backend."""
    saved_name = default_storage.save('1/cat.png', ContentFile(b'pixels'))
    file_instance = _create_file(user, saved_name)

    assert file_instance.read_content() == b'pixels'


@pytest.mark.django_db
def test_file_cascade_delete_with_user(user, mock_s3):
    """Test files are deleted when user is deleted."""
    _create_file(user, '1/cat.png')

    assert File.objects.count() == 1

    user.delete()

    assert File.objects.count() == 0
