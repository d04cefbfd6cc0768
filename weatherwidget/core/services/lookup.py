from __future__ import annotations

import logging
from typing import Optional

import requests

from ..entities import (
    GENERIC_ERROR_MESSAGE,
    PENDING,
    ErrorKind,
    LookupFailure,
    LookupResult,
    LookupState,
)
from ..providers.base import NotFound, ProviderError, TransportFailure, UpstreamUnavailable, WeatherProvider


DEFAULT_LOCATION = "London"


class WeatherLookup:
    """Resolve a location through one provider and hold the latest outcome.

    ``fetch`` always produces exactly one of :class:`NormalizedWeather` or
    :class:`LookupFailure`; every error raised below this boundary is folded
    into a user-facing message here. The state is only mutated by
    :meth:`_commit`.
    """

    def __init__(self, provider: WeatherProvider, *, default_location: str = DEFAULT_LOCATION) -> None:
        self.provider = provider
        self.default_location = default_location
        self.state = LookupState(location=default_location)
        self._log = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    # Public API ---------------------------------------------------------
    def mount(self) -> LookupResult:
        return self.fetch(self.state.location or self.default_location)

    def set_location(self, location: str) -> Optional[LookupResult]:
        """Commit a new input value; only a changed value triggers a lookup."""
        if location == self.state.location and self.state.result is not None:
            return None
        return self.fetch(location)

    def submit(self) -> LookupResult:
        return self.fetch(self.state.location)

    def fetch(self, location: str) -> LookupResult:
        self.state.location = location
        self._commit(PENDING)
        result = self._resolve(location)
        self._commit(result)
        return result

    # Helpers ------------------------------------------------------------
    def _resolve(self, location: str) -> LookupResult:
        provider_name = self.provider.name
        if not location or not location.strip():
            return self._failure(self.provider.not_found_message, ErrorKind.NOT_FOUND)
        try:
            weather = self.provider.resolve(location)
        except NotFound as exc:
            self._log.warning("Provider %s: %s", provider_name, exc)
            return self._failure(exc.user_message or self.provider.not_found_message, ErrorKind.NOT_FOUND)
        except UpstreamUnavailable as exc:
            self._log.warning("Provider %s unavailable: %s", provider_name, exc)
            return self._failure(exc.user_message, ErrorKind.UPSTREAM_UNAVAILABLE)
        except TransportFailure as exc:
            self._log.warning("Provider %s unreachable: %s", provider_name, exc)
            return self._failure(exc.user_message, ErrorKind.TRANSPORT_FAILURE)
        except (ProviderError, requests.RequestException, ValueError, KeyError, TypeError) as exc:
            self._log.error("Lookup for %r failed", location, exc_info=exc)
            return self._failure(None, ErrorKind.TRANSPORT_FAILURE)
        self._log.info("Lookup for %r via %s succeeded", location, provider_name)
        return weather

    def _failure(self, message: Optional[str], kind: ErrorKind) -> LookupFailure:
        return LookupFailure(message=message or GENERIC_ERROR_MESSAGE, kind=kind)

    def _commit(self, result) -> None:
        self.state.result = result


__all__ = ["DEFAULT_LOCATION", "WeatherLookup"]
