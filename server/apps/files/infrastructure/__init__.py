"""Infrastructure layer for files app.

This package contains integrations with external systems:
- Custom storage backend (S3/MinIO)
- Metadata extraction (MIME type, checksum)

Keep infrastructure concerns separate from business logic.
"""
