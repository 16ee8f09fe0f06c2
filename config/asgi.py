"""ASGI config for the Travel Core project.

Exposes the ASGI application for servers that speak ASGI. Every core
operation is synchronous, so Django runs the views in a thread pool.
"""

import os
from django.core.asgi import get_asgi_application  # type: ignore

# Use the development settings by default. Production servers should set
# DJANGO_SETTINGS_MODULE accordingly.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_asgi_application()
