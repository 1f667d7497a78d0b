"""Fixtures shared by all test packages."""

import boto3
import pytest
from django.contrib.auth import get_user_model
from django.core.files.base import ContentFile
from moto import mock_aws

User = get_user_model()

# PNG signature padded with zeros, enough for checksums and size checks
PNG_BYTES = b'\x89PNG\r\n\x1a\n' + b'\x00' * 32


class FakeRecognition:
    """Recognition client that records files instead of calling AWS."""

    def __init__(self) -> None:
        self.processed = []

    def process_image(self, file):
        self.processed.append(file)
        return []


@pytest.fixture(autouse=True)
def fake_recognition(monkeypatch):
    """Replace Amazon Rekognition in the signal receivers.

    Returns:
        FakeRecognition shared by every processor built during the test.
    """
    from server.apps.recognition import slots  # noqa: WPS433

    recognition = FakeRecognition()
    monkeypatch.setattr(slots, 'AmazonRekognition', lambda: recognition)
    return recognition


@pytest.fixture
def user(db):
    """Create test user.

    Returns:
        User instance for testing.
    """
    return User.objects.create_user(
        username='testuser',
        password='testpass123',
        email='test@example.com',
    )


@pytest.fixture
def mock_s3(settings):
    """Mock S3 service with the configured bucket.

    Yields:
        boto3 S3 resource with the storage bucket created.
    """
    bucket_name = settings.STORAGES['default']['OPTIONS']['bucket_name']
    with mock_aws():
        conn = boto3.resource('s3', region_name='us-east-1')
        conn.create_bucket(Bucket=bucket_name)
        yield conn


@pytest.fixture
def sample_image_content():
    """Sample PNG image content for testing.

    Returns:
        ContentFile with PNG bytes.
    """
    return ContentFile(PNG_BYTES, name='cat.png')
