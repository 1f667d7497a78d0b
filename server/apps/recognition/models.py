"""Database models for recognition app."""

from typing import Final, final, override

from django.db import models

from server.apps.files.models import File

_LABEL_NAME_MAX_LENGTH: Final = 255


@final
class RecognitionLabel(models.Model):
    """Label detected in an uploaded image.

    A recognition run replaces all labels previously stored for the
    same file, so the set always reflects the latest content.
    """

    file = models.ForeignKey(
        File,
        on_delete=models.CASCADE,
        related_name='recognition_labels',
    )

    name = models.CharField(
        max_length=_LABEL_NAME_MAX_LENGTH,
    )

    confidence = models.FloatField(
        help_text='Confidence reported by the recognition service, in percent',
    )

    parents = models.JSONField(
        default=list,
        blank=True,
        help_text='Names of the broader labels this label belongs to',
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Model metadata."""

        verbose_name = 'Recognition label'  # type: ignore[mutable-override]
        verbose_name_plural = 'Recognition labels'  # type: ignore[mutable-override]
        ordering = ['file', '-confidence']

        constraints = [
            models.UniqueConstraint(
                fields=['file', 'name'],
                name='recognition_file_label_unique',
            ),
        ]

        indexes = [
            models.Index(
                fields=['name'],
                name='recognition_label_name_idx',
            ),
        ]

    @override
    def __str__(self) -> str:
        """String representation."""
        return f'{self.name} ({self.confidence:.1f}%)'
