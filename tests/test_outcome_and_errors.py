import httpx
import pytest

from gtx_translate.domain.models.outcome import Outcome
from gtx_translate.errors import (
    EmptyBodyError,
    HttpStatusError,
    InvalidArgumentError,
    MalformedResponseError,
    TranslationError,
    TransportError,
    UnknownLanguageError,
)


def test_success_outcome():
    outcome = Outcome.success("value")

    assert outcome.is_success
    assert not outcome.is_failure
    assert outcome.get_or_raise() == "value"
    assert outcome.get_or_none() == "value"


def test_failure_outcome_reraises_same_error():
    error = EmptyBodyError()
    outcome = Outcome.failure(error)

    assert outcome.is_failure
    assert outcome.get_or_none() is None
    with pytest.raises(EmptyBodyError) as exc_info:
        outcome.get_or_raise()
    assert exc_info.value is error


@pytest.mark.parametrize("kwargs", [{}, {"value": 1, "error": ValueError()}])
def test_outcome_requires_exactly_one_side(kwargs):
    with pytest.raises(ValueError):
        Outcome(**kwargs)


@pytest.mark.parametrize(
    "error",
    [
        InvalidArgumentError(),
        UnknownLanguageError("xx"),
        TransportError(cause=httpx.ConnectError("down")),
        HttpStatusError(403),
        EmptyBodyError(),
        MalformedResponseError(),
    ],
)
def test_every_error_is_a_translation_error(error):
    assert isinstance(error, TranslationError)
    assert error.to_dict()["status"] == "error"
    assert error.to_dict()["error"] == error.__class__.__name__


def test_http_status_error_payload():
    error = HttpStatusError(403)

    assert error.to_dict() == {
        "status": "error",
        "error": "HttpStatusError",
        "message": "Error caught from HTTP request: 403",
        "details": {"status_code": 403},
    }


def test_transport_error_keeps_cause():
    cause = httpx.ConnectError("down")
    error = TransportError(cause=cause)

    assert error.cause is cause
    assert error.message == "Exception caught from HTTP request"
    assert "ConnectError" in error.details["cause"]


def test_invalid_argument_is_value_error():
    assert isinstance(InvalidArgumentError(), ValueError)
