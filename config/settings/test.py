"""Settings used by the test suite.

File-backed SQLite so tests that run transitions on several threads share
one database, and quiet logging so test output stays readable.
"""

import tempfile
from pathlib import Path

from .base import *  # noqa: F401,F403
from .base import LOGGING

SECRET_KEY = 'test-secret-key'

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': Path(tempfile.gettempdir()) / 'travelcore.sqlite3',
        'OPTIONS': {
            'transaction_mode': 'IMMEDIATE',
            'timeout': 20,
        },
        'TEST': {
            'NAME': Path(tempfile.gettempdir()) / 'travelcore_test.sqlite3',
        },
    }
}

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

LOGGING["handlers"]["console"]["level"] = "CRITICAL"
