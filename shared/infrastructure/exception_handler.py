"""
DRF exception handler for domain errors

Maps the domain error taxonomy to HTTP responses so services can raise
business errors without knowing about the transport. Anything that is
not a DomainError is left to DRF's default handler.
"""

from __future__ import annotations

import logging

from django.utils import timezone  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler as drf_exception_handler  # type: ignore

from shared.domain.exceptions import (
    ConflictError,
    DomainError,
    ForbiddenError,
    InvalidArgumentError,
    InvalidStateError,
    NotFoundError,
    PaymentWindowClosedError,
)

logger = logging.getLogger(__name__)

# Most specific classes first: PaymentWindowClosedError is an InvalidStateError
STATUS_BY_ERROR = (
    (NotFoundError, status.HTTP_404_NOT_FOUND, "Not Found"),
    (ConflictError, status.HTTP_409_CONFLICT, "Conflict"),
    (ForbiddenError, status.HTTP_403_FORBIDDEN, "Forbidden"),
    (PaymentWindowClosedError, status.HTTP_408_REQUEST_TIMEOUT, "Payment Window Closed"),
    (InvalidStateError, status.HTTP_400_BAD_REQUEST, "Bad Request"),
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST, "Bad Request"),
)


def resolve_status(exc: DomainError) -> tuple[int, str]:
    for error_class, http_status, title in STATUS_BY_ERROR:
        if isinstance(exc, error_class):
            return http_status, title
    return status.HTTP_400_BAD_REQUEST, "Bad Request"


def domain_exception_handler(exc, context):  # type: ignore
    """Render DomainError subclasses as ``{"status", "error", "message", "path"}``."""

    if not isinstance(exc, DomainError):
        return drf_exception_handler(exc, context)

    http_status, title = resolve_status(exc)
    request = context.get("request")
    logger.warning(f"{title}: {exc.message}")

    return Response(
        {
            "timestamp": timezone.now().isoformat(),
            "status": http_status,
            "error": title,
            "message": exc.message,
            "path": request.path if request is not None else "",
        },
        status=http_status,
    )
