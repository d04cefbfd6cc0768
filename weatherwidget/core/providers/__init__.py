"""Weather providers and the factory selecting one at configuration time."""
from __future__ import annotations

from typing import Dict, Type

from django.core.exceptions import ImproperlyConfigured

from .base import NotFound, ProviderError, RequestConfig, TransportFailure, UpstreamUnavailable, WeatherProvider
from .openmeteo import GeoForecastProvider
from .weatherstack import DirectQueryProvider


PROVIDERS: Dict[str, Type[WeatherProvider]] = {
    GeoForecastProvider.name: GeoForecastProvider,
    DirectQueryProvider.name: DirectQueryProvider,
}


def build_provider(name: str, **options) -> WeatherProvider:
    try:
        provider_cls = PROVIDERS[name]
    except KeyError:
        choices = ", ".join(sorted(PROVIDERS))
        raise ImproperlyConfigured(f"Unknown weather provider {name!r} (expected one of: {choices})") from None
    return provider_cls(**options)


__all__ = [
    "DirectQueryProvider",
    "GeoForecastProvider",
    "NotFound",
    "PROVIDERS",
    "ProviderError",
    "RequestConfig",
    "TransportFailure",
    "UpstreamUnavailable",
    "WeatherProvider",
    "build_provider",
]
