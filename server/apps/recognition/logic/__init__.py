"""Business logic layer for recognition app.

Pure input-policy checks live here; nothing in this package talks to
storage or to AWS.
"""
