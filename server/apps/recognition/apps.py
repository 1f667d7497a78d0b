"""Django app configuration for recognition app."""

from typing import override

from django.apps import AppConfig


class RecognitionConfig(AppConfig):
    """Configuration for recognition app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'server.apps.recognition'
    verbose_name = 'Image recognition'

    @override
    def ready(self) -> None:
        """Connect the file processor to the upload and replace signals."""
        from server.apps.recognition import slots  # noqa: F401
