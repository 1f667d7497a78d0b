"""Django admin configuration for files app."""

from django.contrib import admin
from django.db.models import QuerySet
from django.http import HttpRequest

from server.apps.files.models import File


@admin.register(File)
class FileAdmin(admin.ModelAdmin):
    """Admin interface for File model."""

    list_display = [
        'filename_display',
        'user',
        'folder_path_display',
        'size_display',
        'mime_type',
        'uploaded_at',
    ]

    list_filter = [
        'mime_type',
        'uploaded_at',
        'user',
    ]

    search_fields = [
        'file',  # Searches file.name field
        'checksum_sha256',
    ]

    readonly_fields = [
        'file',
        'size_bytes',
        'mime_type',
        'checksum_sha256',
        'uploaded_at',
        'modified_at',
    ]

    fieldsets = (
        ('File Information', {
            'fields': ('file', 'user'),
        }),
        ('Metadata', {
            'fields': (
                'size_bytes',
                'mime_type',
                'checksum_sha256',
            ),
        }),
        ('Timestamps', {
            'fields': ('uploaded_at', 'modified_at'),
        }),
    )

    @admin.display(description='Filename')
    def filename_display(self, obj: File) -> str:
        """Display filename extracted from file.name."""
        return obj.get_filename()

    @admin.display(description='Folder')
    def folder_path_display(self, obj: File) -> str:
        """Display folder path extracted from file.name."""
        return obj.get_folder_path()

    @admin.display(description='Size')
    def size_display(self, obj: File) -> str:
        """Display file size in human-readable format.

        Args:
            obj: File instance.

        Returns:
            Formatted size string (e.g., '1.5 MB', '234 KB').
        """
        size_bytes = obj.size_bytes

        if size_bytes < 1024:
            return f'{size_bytes} B'
        if size_bytes < 1024 * 1024:  # noqa: WPS531
            return f'{size_bytes / 1024:.1f} KB'
        return f'{size_bytes / (1024 * 1024):.1f} MB'

    def get_queryset(self, request: HttpRequest) -> QuerySet[File]:
        """Optimize queryset with select_related."""
        return super().get_queryset(request).select_related('user')
