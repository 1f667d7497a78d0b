"""Tests for the upload/replace file processor."""

import logging

import pytest

from server.apps.files.models import File
from server.apps.files.signals import file_replaced, file_uploaded
from server.apps.recognition.slots import FileProcessor
from tests.conftest import FakeRecognition


@pytest.fixture
def make_file(user):
    """Build File records without touching storage.

    Returns:
        Factory taking mime type, size and path.
    """
    def factory(mime_type='image/png', size_bytes=1000, path=None):
        return File.objects.create(
            user=user,
            file=path or f'{user.id}/cat.png',
            size_bytes=size_bytes,
            mime_type=mime_type,
            checksum_sha256='a' * 64,
        )
    return factory


@pytest.fixture
def processor(fake_recognition):
    """File processor wired to the fake recognition client.

    Returns:
        FileProcessor instance.
    """
    return FileProcessor(recognition=fake_recognition)


@pytest.fixture
def default_policy(settings):
    """Use the built-in type list and size ceiling."""
    settings.IMAGE_RECOGNITION = {}


@pytest.mark.django_db
@pytest.mark.usefixtures('default_policy')
class TestProcessFile:
    """Tests for FileProcessor.process_file."""

    @pytest.mark.parametrize('mime_type', ['image/jpeg', 'image/png'])
    def test_valid_image_is_sent(
        self,
        make_file,
        processor,
        fake_recognition,
        mime_type,
    ):
        """Test default image types are forwarded."""
        file_instance = make_file(mime_type=mime_type)

        processor.process_file(file_instance, folder='1')

        assert fake_recognition.processed == [file_instance]

    def test_size_at_ceiling_is_sent(self, make_file, processor, fake_recognition):
        """Test a file of exactly the ceiling size passes."""
        file_instance = make_file(size_bytes=2048000)

        processor.process_file(file_instance)

        assert fake_recognition.processed == [file_instance]

    @pytest.mark.parametrize('size_bytes', [0, 2048001])
    def test_invalid_size_is_skipped(
        self,
        make_file,
        processor,
        fake_recognition,
        caplog,
        size_bytes,
    ):
        """Test empty and oversized files are skipped with a log entry."""
        file_instance = make_file(size_bytes=size_bytes)

        with caplog.at_level(logging.INFO, logger='server.apps.recognition'):
            processor.process_file(file_instance)

        assert fake_recognition.processed == []
        assert f'Invalid file size: {size_bytes} bytes' in caplog.text

    @pytest.mark.parametrize('mime_type', [
        'image/gif',
        'text/plain',
        'application/octet-stream',
        'image/png/extra',
        '',
    ])
    def test_invalid_type_is_skipped(
        self,
        make_file,
        processor,
        fake_recognition,
        caplog,
        mime_type,
    ):
        """Test files outside the type policy are skipped."""
        file_instance = make_file(mime_type=mime_type)

        with caplog.at_level(logging.INFO, logger='server.apps.recognition'):
            processor.process_file(file_instance)

        assert fake_recognition.processed == []
        assert 'Invalid image type' in caplog.text

    def test_type_checked_before_size(
        self,
        make_file,
        processor,
        caplog,
    ):
        """Test a file failing both checks reports the type."""
        file_instance = make_file(mime_type='text/plain', size_bytes=0)

        with caplog.at_level(logging.INFO, logger='server.apps.recognition'):
            processor.process_file(file_instance)

        assert 'Invalid image type: text/plain' in caplog.text
        assert 'Invalid file size' not in caplog.text

    def test_file_details_are_logged(self, make_file, processor, caplog):
        """Test metadata of every processed file is logged."""
        file_instance = make_file(mime_type='image/png', size_bytes=1234)

        with caplog.at_level(logging.INFO, logger='server.apps.recognition'):
            processor.process_file(file_instance)

        assert f'File ID: {file_instance.id}' in caplog.text
        assert 'File name: cat.png' in caplog.text
        assert 'File mime type: image/png' in caplog.text
        assert 'File size: 1234' in caplog.text

    def test_malformed_type_is_logged_whole(self, make_file, processor, caplog):
        """Test a mime type without subtype is logged unchanged."""
        file_instance = make_file(mime_type='png')

        with caplog.at_level(logging.INFO, logger='server.apps.recognition'):
            processor.process_file(file_instance)

        assert 'Invalid image type: png' in caplog.text

    def test_returns_whether_file_was_sent(self, make_file, processor):
        """Test the result tells sent files from skipped ones."""
        image = make_file(mime_type='image/png', path='1/a.png')
        text = make_file(mime_type='text/plain', path='1/a.txt')

        assert processor.process_file(image) is True
        assert processor.process_file(text) is False


@pytest.mark.django_db
@pytest.mark.usefixtures('default_policy')
class TestRecognitionClient:
    """Tests for creating the default recognition client."""

    @pytest.fixture
    def created_clients(self, monkeypatch, fake_recognition):
        """Count AmazonRekognition clients built by processors.

        Returns:
            List with one entry per created client.
        """
        from server.apps.recognition import slots  # noqa: WPS433

        created = []

        def factory():
            created.append(fake_recognition)
            return fake_recognition

        monkeypatch.setattr(slots, 'AmazonRekognition', factory)
        return created

    def test_rejected_file_creates_no_client(self, make_file, created_clients):
        """Test files failing validation never build a client."""
        file_instance = make_file(mime_type='text/plain')

        FileProcessor().process_file(file_instance)

        assert created_clients == []

    def test_client_created_once(
        self,
        make_file,
        created_clients,
        fake_recognition,
    ):
        """Test one client is built and reused by a processor."""
        first = make_file(path='1/a.png')
        second = make_file(path='1/b.png')
        processor = FileProcessor()

        processor.process_file(first)
        processor.process_file(second)

        assert len(created_clients) == 1
        assert fake_recognition.processed == [first, second]

    def test_injected_client_is_used(self, make_file, created_clients):
        """Test an injected client replaces the default one."""
        recognition = FakeRecognition()
        file_instance = make_file()

        FileProcessor(recognition=recognition).process_file(file_instance)

        assert recognition.processed == [file_instance]
        assert created_clients == []


@pytest.mark.django_db
class TestConfiguredPolicy:
    """Tests for processor behaviour with configured policy."""

    def test_configured_types_replace_defaults(
        self,
        settings,
        make_file,
        processor,
        fake_recognition,
    ):
        """Test a configured allow-list replaces the default one."""
        settings.IMAGE_RECOGNITION = {'image_types': 'gif'}
        gif = make_file(mime_type='image/gif', path='1/a.gif')
        png = make_file(mime_type='image/png', path='1/b.png')

        processor.process_file(gif)
        processor.process_file(png)

        assert fake_recognition.processed == [gif]

    def test_configured_ceiling(
        self,
        settings,
        make_file,
        processor,
        fake_recognition,
    ):
        """Test a configured size ceiling is honoured."""
        settings.IMAGE_RECOGNITION = {'max_file_size': 500}
        small = make_file(size_bytes=500, path='1/small.png')
        large = make_file(size_bytes=501, path='1/large.png')

        processor.process_file(small)
        processor.process_file(large)

        assert fake_recognition.processed == [small]

    @pytest.mark.parametrize('image_types', ['jpeg,,png', ',png', 'png,'])
    def test_empty_subtype_never_passes(
        self,
        settings,
        make_file,
        processor,
        fake_recognition,
        image_types,
    ):
        """Test stray commas in the type list do not admit 'image/'."""
        settings.IMAGE_RECOGNITION = {'image_types': image_types}
        file_instance = make_file(mime_type='image/')

        assert processor.process_file(file_instance) is False
        assert fake_recognition.processed == []


@pytest.mark.django_db
@pytest.mark.usefixtures('default_policy')
class TestProcessReplaceFile:
    """Tests for FileProcessor.process_replace_file."""

    def test_replace_takes_upload_path(
        self,
        make_file,
        processor,
        fake_recognition,
    ):
        """Test replaced images are validated and sent like uploads."""
        file_instance = make_file()

        processor.process_replace_file(file_instance, '1/cat.png.tmp')

        assert fake_recognition.processed == [file_instance]

    def test_replace_invalid_is_skipped(
        self,
        make_file,
        processor,
        fake_recognition,
    ):
        """Test replaced files still go through validation."""
        file_instance = make_file(size_bytes=0)

        processor.process_replace_file(file_instance)

        assert fake_recognition.processed == []


@pytest.mark.django_db
@pytest.mark.usefixtures('default_policy')
class TestReceivers:
    """Tests for the signal receivers of the processor."""

    def test_upload_signal(self, make_file, fake_recognition):
        """Test the upload signal reaches the processor."""
        file_instance = make_file()

        file_uploaded.send(sender=File, file=file_instance, folder='1')

        assert fake_recognition.processed == [file_instance]

    def test_replace_signal(self, make_file, fake_recognition):
        """Test the replace signal reaches the processor."""
        file_instance = make_file()

        file_replaced.send(
            sender=File,
            file=file_instance,
            temporary_file='1/cat.png.tmp',
        )

        assert fake_recognition.processed == [file_instance]

    def test_receivers_return_nothing(self, make_file):
        """Test the sender gets no value back from the processor."""
        file_instance = make_file()

        responses = file_uploaded.send(
            sender=File,
            file=file_instance,
            folder='1',
        )

        assert all(response is None for _, response in responses)
