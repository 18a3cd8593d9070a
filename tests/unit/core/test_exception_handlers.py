"""Unit tests for the global envelope exception handler."""

from __future__ import annotations

import pytest
from rest_framework import exceptions

from modules.core.exception_handlers import (
    UNEXPECTED_ERROR_MESSAGE,
    envelope_exception_handler,
    validation_errors,
)

pytestmark = pytest.mark.unit


class TestValidationErrors:
    def test_one_entry_per_field(self):
        detail = {
            "name": ["'Name' must not be empty."],
            "price": ["'Price' must be greater than '0'.", "other"],
        }
        assert validation_errors(detail) == [
            {"Error": "'Name' must not be empty."},
            {"Error": "'Price' must be greater than '0'."},
        ]

    def test_plain_list(self):
        assert validation_errors(["boom"]) == [{"Error": "boom"}]

    def test_plain_string(self):
        assert validation_errors("boom") == [{"Error": "boom"}]


class TestEnvelopeExceptionHandler:
    def test_validation_error_becomes_400_envelope(self):
        exc = exceptions.ValidationError({"summary": ["'Summary' must not be empty."]})
        response = envelope_exception_handler(exc, {})
        assert response.status_code == 400
        assert response.data == {
            "status": False,
            "message": [{"Error": "'Summary' must not be empty."}],
            "data": {},
        }

    def test_not_found_keeps_status_and_detail(self):
        response = envelope_exception_handler(exceptions.NotFound("gone"), {})
        assert response.status_code == 404
        assert response.data == {"status": False, "data": None, "message": "gone"}

    def test_throttled_reports_wait(self):
        response = envelope_exception_handler(exceptions.Throttled(wait=12), {})
        assert response.status_code == 429
        assert response.data["message"] == "Request limit exceeded, retry in 12 seconds."
        assert response["Retry-After"] == "12"

    def test_unhandled_exception_hides_details(self):
        try:
            raise RuntimeError("secret internals")
        except RuntimeError as exc:
            response = envelope_exception_handler(exc, {})
        assert response.status_code == 500
        assert response.data == {
            "status": False,
            "data": None,
            "message": UNEXPECTED_ERROR_MESSAGE,
        }
