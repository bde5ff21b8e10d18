"""
Unit Tests for the response envelope
"""

import json

from core.response import (
    ErrorCode,
    RequestValidationFailed,
    ServiceError,
    StatusCode,
    error_response,
    exception_response,
    success_response,
)
from microservices.location_service.protocols import InvalidAddressError
from microservices.shipment_service.protocols import ShipmentNotFoundError

from tests.fixtures import make_location


def _body(response) -> dict:
    return json.loads(response.body)


class TestSuccessResponse:

    def test_success_envelope(self):
        response = success_response({"a": 1})

        assert response.status_code == 200
        assert _body(response) == {"code": 0, "message": "success", "data": {"a": 1}}

    def test_null_data_is_kept(self):
        body = _body(success_response(None))

        assert "data" in body
        assert body["data"] is None

    def test_models_are_encoded_with_wire_names(self):
        body = _body(success_response(make_location(zip_code="10115")))

        assert body["data"]["zipCode"] == "10115"


class TestErrorResponse:

    def test_defaults(self):
        response = error_response("boom")

        assert response.status_code == 500
        assert _body(response) == {"code": 1000, "message": "boom"}

    def test_custom_code_and_status(self):
        response = error_response("The data was not found!", code=1010, status_code=404)

        assert response.status_code == 404
        assert _body(response)["code"] == 1010


class TestExceptionResponse:

    def test_validation_failure_is_403_with_encoded_errors(self):
        exc = RequestValidationFailed([
            {"loc": ("article_quantity",), "msg": "Input should be greater than 0", "type": "greater_than"}
        ])
        response = exception_response(exc)
        body = _body(response)

        assert response.status_code == StatusCode.FORBIDDEN
        assert body["code"] == ErrorCode.DEFAULT
        assert json.loads(body["message"]) == [
            {"loc": ["article_quantity"], "msg": "Input should be greater than 0", "type": "greater_than"}
        ]

    def test_invalid_address(self):
        response = exception_response(InvalidAddressError("receiver_address"))

        assert response.status_code == 403
        assert _body(response) == {"code": 1000, "message": "Invalid receiver_address"}

    def test_not_found(self):
        response = exception_response(
            ShipmentNotFoundError("abc", "The data was not found! May have been deleted!")
        )

        assert response.status_code == 404
        assert _body(response) == {
            "code": 1010,
            "message": "The data was not found! May have been deleted!",
        }

    def test_plain_service_error_is_internal(self):
        response = exception_response(ServiceError("provider down"))

        assert response.status_code == 500
        assert _body(response) == {"code": 1000, "message": "provider down"}

    def test_unexpected_exception_keeps_raw_message(self):
        response = exception_response(RuntimeError("connection refused"))

        assert response.status_code == 500
        assert _body(response) == {"code": 1000, "message": "connection refused"}
