"""DRF glue for the domain error taxonomy.

``domain_exception_handler`` is installed as REST_FRAMEWORK's
EXCEPTION_HANDLER. Domain errors become JSON bodies built from
``DomainError.to_dict()``; everything else goes to DRF's own handler.
"""

from __future__ import annotations

import logging

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.domain.exceptions import (
    ConflictError,
    DomainError,
    InvalidInput,
    InvalidStateTransition,
    NotFound,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = {
    InvalidInput: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    InvalidStateTransition: status.HTTP_409_CONFLICT,
}


def domain_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        http_status = STATUS_BY_ERROR.get(type(exc), status.HTTP_400_BAD_REQUEST)
        view = context.get("view")
        logger.info(
            f"{type(view).__name__ if view else 'API'} answered {http_status}: "
            f"{exc.kind} ({exc.message})"
        )
        return Response(exc.to_dict(), status=http_status)
    return exception_handler(exc, context)
