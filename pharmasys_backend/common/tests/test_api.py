# common/tests/test_api.py

from __future__ import annotations

from django.core.exceptions import ValidationError as DjangoValidationError
from django.test import SimpleTestCase, TestCase
from django.urls import reverse
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.test import APIClient

from common.api import exception_handler
from common.exceptions import (
    AuthorizationError,
    InvalidStateError,
    NotFoundError,
    OutOfStockError,
    ValidationError,
)


class ExceptionHandlerTests(SimpleTestCase):
    """
    GUARANTEES:
    - Every failure uses the {"error": ...} envelope
    - Domain errors keep their own status code
    """

    def test_domain_errors_map_to_status(self):
        cases = [
            (ValidationError("bad"), 400),
            (AuthorizationError(), 403),
            (NotFoundError("gone"), 404),
            (InvalidStateError("nope"), 409),
            (OutOfStockError(), 409),
        ]
        for exc, expected in cases:
            response = exception_handler(exc, {})
            self.assertEqual(response.status_code, expected)
            self.assertEqual(response.data["error"], exc.message)

    def test_serializer_errors_keep_fields(self):
        exc = drf_exceptions.ValidationError({"qty": ["A valid integer is required."]})
        response = exception_handler(exc, {})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "qty: A valid integer is required.")
        self.assertIn("qty", response.data["fields"])

    def test_django_validation_error_is_400(self):
        response = exception_handler(DjangoValidationError("immutable"), {})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "immutable")

    def test_unexpected_error_is_generic_500(self):
        with self.assertLogs("common.api", level="ERROR"):
            response = exception_handler(RuntimeError("secret detail"), {})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data, {"error": "Internal server error"})


class HealthCheckTests(TestCase):
    def test_health_ok(self):
        res = APIClient().get(reverse("health-check"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data, {"status": "ok", "db": "ok"})

    def test_api_root_is_public(self):
        res = APIClient().get(reverse("api-root"))
        self.assertEqual(res.status_code, status.HTTP_200_OK)
