from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Optional

import requests
from requests import Response

from ..entities import NormalizedWeather
from ..icons import IconClassifier


class ProviderError(RuntimeError):
    """Base provider error.

    ``user_message`` is shown to the user verbatim when set; otherwise the
    lookup falls back to the generic error message.
    """

    def __init__(self, detail: str, user_message: Optional[str] = None) -> None:
        super().__init__(detail)
        self.user_message = user_message


class NotFound(ProviderError):
    """Raised when the provider has no match for the requested location."""


class UpstreamUnavailable(ProviderError):
    """Raised when the provider answers without the expected data."""


class TransportFailure(ProviderError):
    """Raised when the provider could not be reached."""


@dataclass
class RequestConfig:
    timeout: Optional[float] = None


class WeatherProvider:
    """Base class for providers resolving a location to current conditions."""

    name = "provider"
    classifier: IconClassifier
    not_found_message: Optional[str] = None

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        self.request_config = request_config or RequestConfig()
        self.session = session or requests.Session()
        self._log = logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")

    def resolve(self, location: str) -> NormalizedWeather:
        raise NotImplementedError

    # helpers ------------------------------------------------------------
    def _handle_response(self, response: Response) -> Response:
        if response.status_code >= 400:
            self._log.error("Provider returned %s: %s", response.status_code, response.text[:500])
            raise UpstreamUnavailable(f"HTTP {response.status_code}")
        return response

    def _request(self, method: str, url: str, **kwargs) -> Response:
        try:
            response = self.session.request(
                method,
                url,
                timeout=self.request_config.timeout,
                **kwargs,
            )
        except requests.Timeout as exc:
            self._log.error("Request timed out", exc_info=exc)
            raise TransportFailure("timeout") from exc
        except requests.RequestException as exc:
            self._log.error("Request failed", exc_info=exc)
            raise TransportFailure("request failed") from exc
        return self._handle_response(response)

    def _json(self, response: Response) -> dict:
        try:
            data = response.json()
        except ValueError as exc:
            self._log.error("Failed to decode JSON", exc_info=exc)
            raise UpstreamUnavailable("invalid json") from exc
        if not isinstance(data, dict):
            raise UpstreamUnavailable("unexpected payload")
        return data


def require_number(payload: dict, key: str) -> Any:
    """Return ``payload[key]`` untouched if it is a finite real number."""
    value = payload.get(key)
    if isinstance(value, bool) or not isinstance(value, Real):
        raise UpstreamUnavailable(f"missing or non-numeric {key!r}")
    if not math.isfinite(value):
        raise UpstreamUnavailable(f"non-finite {key!r}")
    return value


def optional_number(payload: dict, key: str) -> Any:
    if payload.get(key) is None:
        return None
    return require_number(payload, key)


def require_code(payload: dict, key: str) -> int:
    value = require_number(payload, key)
    if isinstance(value, float):
        if not value.is_integer():
            raise UpstreamUnavailable(f"non-integer {key!r}")
        return int(value)
    return value


__all__ = [
    "NotFound",
    "ProviderError",
    "RequestConfig",
    "TransportFailure",
    "UpstreamUnavailable",
    "WeatherProvider",
    "optional_number",
    "require_code",
    "require_number",
]
