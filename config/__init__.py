"""Top-level package for Django configuration.

This package holds the settings modules for each environment, the URL
configuration, the WSGI/ASGI entry points and the bootstrap that wires
the travel core's command handlers into a message bus.
"""
