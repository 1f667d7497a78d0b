"""Main settings file.

Composes the components with django-split-settings.
"""

from split_settings.tools import include

include(
    'components/common.py',
    'components/logs.py',
    'components/storages.py',
    'components/recognition.py',
)
