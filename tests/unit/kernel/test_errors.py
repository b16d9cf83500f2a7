"""Unit tests for the kernel error hierarchy and the error normalizer."""

from __future__ import annotations

import json

import httpx
import pytest

from purehttp.kernel.errors import (
    UNKNOWN_ERROR_MESSAGE,
    BaseError,
    ExceptionManager,
    HttpError,
    InvalidRequestError,
    MalformedResponseError,
    RequestAbortedError,
    RequestTimeoutError,
    TransportError,
    normalize_error,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        assert BaseError("wrap", cause=cause).__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed == {"code": "oops", "message": "oops", "detail": {"x": 1}}


class TestHttpErrors:
    def test_status_defaults_to_none(self) -> None:
        err = HttpError("boom")
        assert err.status is None
        assert "status" not in err.to_dict()

    def test_status_in_dict(self) -> None:
        assert HttpError("boom", status=502).to_dict()["status"] == 502

    def test_timeout_literal_message(self) -> None:
        err = RequestTimeoutError()
        assert err.message == "Request Timeout"
        assert err.code == "request_timeout"

    def test_aborted_literal_message(self) -> None:
        err = RequestAbortedError()
        assert err.message == "Request Aborted"
        assert err.code == "request_aborted"

    @pytest.mark.parametrize(
        "cls",
        [TransportError, RequestTimeoutError, RequestAbortedError, MalformedResponseError, InvalidRequestError],
    )
    def test_all_kinds_are_http_errors(self, cls: type[HttpError]) -> None:
        assert issubclass(cls, HttpError)
        assert issubclass(cls, BaseError)

    def test_timeout_and_transport_messages_differ(self) -> None:
        assert RequestTimeoutError().message != TransportError("connection refused").message


class TestNormalizeError:
    def test_native_error_keeps_message(self) -> None:
        err = normalize_error(Exception("test error"))
        assert isinstance(err, HttpError)
        assert err.message == "test error"
        assert err.status is None

    def test_plain_string_is_unknown(self) -> None:
        err = normalize_error("random unknown error")
        assert isinstance(err, HttpError)
        assert err.message == "Unknown error occurred"
        assert err.message == UNKNOWN_ERROR_MESSAGE

    @pytest.mark.parametrize("value", [None, 42, {"a": 1}, ["x"], object()])
    def test_non_error_values_never_raise(self, value: object) -> None:
        assert normalize_error(value).message == UNKNOWN_ERROR_MESSAGE

    def test_error_without_message_is_unknown(self) -> None:
        assert normalize_error(RuntimeError()).message == UNKNOWN_ERROR_MESSAGE

    def test_http_error_returned_unchanged(self) -> None:
        original = RequestTimeoutError()
        assert normalize_error(original) is original

    def test_base_error_message_not_json(self) -> None:
        err = normalize_error(BaseError("plain text"))
        assert err.message == "plain text"

    def test_status_code_attribute_is_used(self) -> None:
        exc = RuntimeError("bad gateway")
        exc.status_code = 502  # type: ignore[attr-defined]
        assert normalize_error(exc).status == 502

    def test_status_from_httpx_status_error(self) -> None:
        request = httpx.Request("GET", "http://svc/x")
        response = httpx.Response(404, request=request)
        exc = httpx.HTTPStatusError("not found", request=request, response=response)
        err = normalize_error(exc)
        assert err.message == "not found"
        assert err.status == 404

    def test_custom_error_class(self) -> None:
        err = normalize_error(httpx.ConnectError("refused"), TransportError)
        assert isinstance(err, TransportError)
        assert err.message == "refused"
        assert isinstance(err.cause, httpx.ConnectError)

    def test_broken_str_falls_back_to_unknown(self) -> None:
        class Weird(Exception):
            def __str__(self) -> str:
                raise RuntimeError("no")

        assert normalize_error(Weird()).message == UNKNOWN_ERROR_MESSAGE


class TestExceptionManager:
    def test_wraps_normal_error(self) -> None:
        err = ExceptionManager.handle(Exception("test error"))
        assert isinstance(err, HttpError)
        assert err.message == "test error"

    def test_wraps_unknown_value(self) -> None:
        err = ExceptionManager.handle("random unknown error")
        assert isinstance(err, HttpError)
        assert err.message == "Unknown error occurred"
