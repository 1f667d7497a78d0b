"""Infrastructure layer for recognition app.

Clients for the remote image-recognition services.
"""
