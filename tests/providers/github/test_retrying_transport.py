"""Tests for RetryingTransport - retry, backoff, and rate-limit handling."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import httpx
import pytest

from ghpm.providers.github._retrying_transport import RetryingTransport

_BACKOFF = "ghpm.providers.github._retrying_transport.RetryingTransport._sleep_backoff"

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_response(status_code: int = 200, headers: dict[str, str] | None = None) -> httpx.Response:
    return httpx.Response(status_code=status_code, headers=headers or {})


def _make_request() -> httpx.Request:
    return httpx.Request("POST", "https://api.github.com/graphql")


def _inner(*results: httpx.Response | Exception) -> MagicMock:
    inner = MagicMock(spec=httpx.BaseTransport)
    inner.handle_request.side_effect = list(results)
    return inner


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_defaults(self) -> None:
        transport = RetryingTransport()
        assert transport._max_retries == 3
        assert isinstance(transport._transport, httpx.HTTPTransport)

    def test_custom_inner_transport(self) -> None:
        inner = MagicMock(spec=httpx.BaseTransport)
        transport = RetryingTransport(transport=inner, max_retries=5)
        assert transport._transport is inner
        assert transport._max_retries == 5


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class TestRequests:
    def test_returns_successful_response(self) -> None:
        inner = _inner(_make_response(200))

        response = RetryingTransport(transport=inner).handle_request(_make_request())

        assert response.status_code == 200
        assert inner.handle_request.call_count == 1

    @patch(_BACKOFF)
    def test_retries_on_transport_error_then_succeeds(self, mock_backoff: MagicMock) -> None:
        inner = _inner(httpx.ConnectError("connection reset"), _make_response(200))

        response = RetryingTransport(transport=inner, max_retries=2).handle_request(_make_request())

        assert response.status_code == 200
        assert inner.handle_request.call_count == 2
        mock_backoff.assert_called_once_with(0)

    @patch(_BACKOFF)
    def test_raises_after_max_retries_exhausted(self, mock_backoff: MagicMock) -> None:
        inner = MagicMock(spec=httpx.BaseTransport)
        inner.handle_request.side_effect = httpx.ConnectError("fail")

        with pytest.raises(httpx.TransportError, match="fail"):
            RetryingTransport(transport=inner, max_retries=2).handle_request(_make_request())

        assert inner.handle_request.call_count == 3
        assert mock_backoff.call_count == 2

    @patch("ghpm.providers.github._retrying_transport.time.sleep")
    @patch(_BACKOFF)
    def test_429_honours_retry_after(self, mock_backoff: MagicMock, mock_sleep: MagicMock) -> None:
        inner = _inner(_make_response(429, {"Retry-After": "2"}), _make_response(200))

        response = RetryingTransport(transport=inner, max_retries=2).handle_request(_make_request())

        assert response.status_code == 200
        mock_sleep.assert_called_once_with(2.0)
        mock_backoff.assert_called_once_with(0)

    @patch("ghpm.providers.github._retrying_transport.time.sleep")
    @patch(_BACKOFF)
    def test_502_without_retry_after_only_backs_off(self, mock_backoff: MagicMock, mock_sleep: MagicMock) -> None:
        inner = _inner(_make_response(502), _make_response(200))

        response = RetryingTransport(transport=inner, max_retries=2).handle_request(_make_request())

        assert response.status_code == 200
        mock_sleep.assert_not_called()
        assert mock_backoff.call_count == 1

    @patch(_BACKOFF)
    def test_returns_last_response_when_retries_exhausted(self, mock_backoff: MagicMock) -> None:
        inner = MagicMock(spec=httpx.BaseTransport)
        inner.handle_request.side_effect = lambda request: _make_response(503)

        response = RetryingTransport(transport=inner, max_retries=1).handle_request(_make_request())

        assert response.status_code == 503
        assert inner.handle_request.call_count == 2

    def test_client_errors_are_not_retried(self) -> None:
        inner = _inner(_make_response(401))

        response = RetryingTransport(transport=inner).handle_request(_make_request())

        assert response.status_code == 401
        assert inner.handle_request.call_count == 1


# ---------------------------------------------------------------------------
# Helpers on the class
# ---------------------------------------------------------------------------


class TestParseRetryAfter:
    def test_returns_header_value_as_float(self) -> None:
        assert RetryingTransport._parse_retry_after(_make_response(429, {"Retry-After": "5"})) == 5.0

    def test_defaults_by_status_when_header_missing(self) -> None:
        assert RetryingTransport._parse_retry_after(_make_response(429)) == 1.0
        assert RetryingTransport._parse_retry_after(_make_response(503)) == 0.0

    def test_returns_default_for_non_numeric_header(self) -> None:
        assert RetryingTransport._parse_retry_after(_make_response(429, {"Retry-After": "soon"})) == 1.0

    def test_clamps_negative_values_to_zero(self) -> None:
        assert RetryingTransport._parse_retry_after(_make_response(429, {"Retry-After": "-5"})) == 0.0


class TestSleepBackoff:
    @patch("ghpm.providers.github._retrying_transport.time.sleep")
    @patch("ghpm.providers.github._retrying_transport.random.uniform", return_value=0.1)
    def test_backoff_grows_and_caps(self, mock_uniform: MagicMock, mock_sleep: MagicMock) -> None:
        for attempt, expected in ((0, 1.1), (1, 2.1), (2, 4.1), (10, 4.1)):
            RetryingTransport._sleep_backoff(attempt)
            mock_sleep.assert_called_with(expected)


def test_close_delegates_to_inner_transport() -> None:
    inner = MagicMock(spec=httpx.BaseTransport)

    RetryingTransport(transport=inner).close()

    inner.close.assert_called_once()
