"""Django admin configuration for recognition app."""

from django.contrib import admin
from django.db.models import QuerySet
from django.http import HttpRequest

from server.apps.recognition.models import RecognitionLabel


@admin.register(RecognitionLabel)
class RecognitionLabelAdmin(admin.ModelAdmin):
    """Admin interface for RecognitionLabel model."""

    list_display = [
        'name',
        'file',
        'confidence_display',
        'parents',
        'created_at',
    ]

    list_filter = [
        'name',
        'created_at',
    ]

    search_fields = [
        'name',
        'file__file',
    ]

    readonly_fields = [
        'file',
        'name',
        'confidence',
        'parents',
        'created_at',
    ]

    @admin.display(description='Confidence', ordering='confidence')
    def confidence_display(self, obj: RecognitionLabel) -> str:
        """Display confidence as a percentage."""
        return f'{obj.confidence:.1f}%'

    def get_queryset(self, request: HttpRequest) -> QuerySet[RecognitionLabel]:
        """Optimize queryset with select_related."""
        return super().get_queryset(request).select_related('file__user')

    def has_add_permission(self, request: HttpRequest) -> bool:
        """Labels are only created by the recognition service."""
        return False
