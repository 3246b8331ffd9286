from typing import Type

import pytest

from httpassist.errors import (
    ClientResponseError,
    HttpAssistError,
    ResponseError,
    ServerResponseError,
    TransportError,
    response_error,
)


@pytest.mark.parametrize(
    "status,error_type",
    [
        (400, ClientResponseError),
        (404, ClientResponseError),
        (499, ClientResponseError),
        (500, ServerResponseError),
        (503, ServerResponseError),
        (302, ResponseError),
        (101, ResponseError),
    ],
)
def test_response_error_by_status(status: int, error_type: Type[ResponseError]) -> None:
    error = response_error(status, b"body")
    assert type(error) is error_type
    assert isinstance(error, HttpAssistError)
    assert error.status == status
    assert error.body == b"body"


def test_response_error_text() -> None:
    error = ResponseError(418, b"I'm a teapot \xff")
    assert error.text == "I'm a teapot �"
    assert str(error) == "HTTP 418: I'm a teapot �"


def test_transport_error() -> None:
    inner = ConnectionRefusedError("refused")
    error = TransportError(inner, "https://example.com")
    assert error.inner is inner
    assert not error.cancelled
    assert "https://example.com" in str(error)
    assert TransportError(inner, cancelled=True).cancelled
