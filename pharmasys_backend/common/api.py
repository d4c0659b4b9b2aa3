# common/api.py

"""
API ERROR NORMALIZATION

Installed as REST_FRAMEWORK["EXCEPTION_HANDLER"].

Every failure leaves the API in one envelope:
    {"error": "<short message>"}            (+ "fields" for serializer errors)

Mapping:
- common.exceptions.*            -> their own status_code
- DRF APIException subclasses    -> DRF status (401/403/404/405/429/400)
- django ValidationError         -> 400
- django Http404 / DoesNotExist  -> 404
- anything else                  -> logged, generic 500 (no internals leak)
"""

from __future__ import annotations

import logging

from django.core.exceptions import ObjectDoesNotExist
from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework import status
from rest_framework import exceptions as drf_exceptions
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from common.exceptions import InternalError, PharmaSysError

logger = logging.getLogger(__name__)


def error_response(*, message: str, http_status: int, **extra) -> Response:
    payload = {"error": message}
    payload.update(extra)
    return Response(payload, status=http_status)


def _django_validation_message(exc: DjangoValidationError) -> str:
    if hasattr(exc, "message_dict"):
        parts = []
        for field, messages in exc.message_dict.items():
            joined = "; ".join(str(m) for m in messages)
            parts.append(joined if field == "__all__" else f"{field}: {joined}")
        return " | ".join(parts)
    return "; ".join(str(m) for m in exc.messages)


def _first_error(detail) -> str:
    if isinstance(detail, list) and detail:
        return _first_error(detail[0])
    if isinstance(detail, dict) and detail:
        field, value = next(iter(detail.items()))
        message = _first_error(value)
        return message if field == "non_field_errors" else f"{field}: {message}"
    return str(detail)


def exception_handler(exc, context):
    if isinstance(exc, PharmaSysError):
        if isinstance(exc, InternalError):
            logger.error("Internal error", extra={"view": _view_name(context)})
        return error_response(message=exc.message, http_status=exc.status_code)

    if isinstance(exc, DjangoValidationError):
        return error_response(
            message=_django_validation_message(exc),
            http_status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, ObjectDoesNotExist):
        exc = Http404()

    response = drf_exception_handler(exc, context)

    if response is not None:
        if isinstance(exc, drf_exceptions.ValidationError):
            response.data = {
                "error": _first_error(exc.detail),
                "fields": exc.detail,
            }
        elif isinstance(exc, (drf_exceptions.NotAuthenticated, drf_exceptions.AuthenticationFailed)):
            response.data = {"error": "Unauthorized"}
        elif isinstance(exc, drf_exceptions.PermissionDenied):
            response.data = {"error": "Forbidden: insufficient permissions."}
        elif isinstance(exc, Http404):
            response.data = {"error": "Not found"}
        else:
            detail = response.data.get("detail") if isinstance(response.data, dict) else None
            response.data = {"error": str(detail or exc)}
        return response

    logger.exception("Unhandled API error", extra={"view": _view_name(context)})
    return error_response(
        message=InternalError.default_message,
        http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _view_name(context) -> str:
    view = (context or {}).get("view")
    return view.__class__.__name__ if view is not None else ""
