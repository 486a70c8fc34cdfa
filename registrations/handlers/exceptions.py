"""Map exceptions raised by views to the JSON error envelope.

Wired in as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Domain errors keep their
user-safe message; anything unexpected becomes a generic 500 and is logged
with its traceback.
"""

import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404
from rest_framework import exceptions
from rest_framework.response import Response
from rest_framework.views import set_rollback

from registrations.domain.errors import DomainError

logger = logging.getLogger(__name__)


def success_response(data, status: int = 200) -> Response:
    return Response({"data": data}, status=status)


def error_response(message: str, code: str, status: int, details=None) -> Response:
    error = {"message": message, "code": code}
    if details:
        error["details"] = details
    return Response({"error": error}, status=status)


def api_exception_handler(exc, context) -> Response:
    set_rollback()

    if isinstance(exc, DomainError):
        return error_response(exc.message, exc.code.value, exc.status_code)

    if isinstance(exc, exceptions.ValidationError):
        return error_response(
            "Validation error", "VALIDATION_ERROR", 400, details=exc.detail
        )

    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    if isinstance(exc, exceptions.APIException):
        response = error_response(
            str(exc.detail), exc.default_code.upper(), exc.status_code
        )
        if getattr(exc, "wait", None):
            response["Retry-After"] = str(int(exc.wait))
        return response

    view = context.get("view")
    logger.exception(
        "Unexpected error in %s", type(view).__name__ if view else "unknown view"
    )
    return error_response("Internal server error", "INTERNAL_SERVER_ERROR", 500)
