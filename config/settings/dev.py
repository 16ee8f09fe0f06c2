"""Development settings for the Travel Core project.

This module extends the base settings with development specific
configuration, such as enabling debug, allowing all hosts and rendering
logs for a terminal instead of as JSON. Do not use these settings in
production!
"""

import structlog

from .base import *  # noqa: F401,F403
from .base import LOGGING, LOG_LEVEL

# Enable debug mode for development
DEBUG = True

# Allow all hosts in development
ALLOWED_HOSTS = ['*']

# Human readable log lines
LOGGING["formatters"]["console"] = {
    "()": "structlog.stdlib.ProcessorFormatter",
    "processor": structlog.dev.ConsoleRenderer(colors=False),
    "foreign_pre_chain": LOGGING["formatters"]["json"]["foreign_pre_chain"],
}
LOGGING["handlers"]["console"]["formatter"] = "console"
LOGGING["loggers"]["apps"]["level"] = "DEBUG" if LOG_LEVEL == "DEBUG" else "INFO"
