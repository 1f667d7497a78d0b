"""Business logic layer for files app.

This package contains all business logic for file operations:
- File upload, content replacement and delete
- Sending the upload/replace signals other apps hook into

All business logic should be implemented here, separate from
models (data layer) and infrastructure (external systems).
"""
