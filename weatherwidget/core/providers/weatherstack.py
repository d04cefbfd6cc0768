from __future__ import annotations

from typing import Optional

from django.core.exceptions import ImproperlyConfigured

from .base import NotFound, UpstreamUnavailable, WeatherProvider, optional_number, require_code, require_number
from ..entities import NOT_AVAILABLE, NormalizedWeather
from ..icons import WEATHERSTACK_CLASSIFIER


class DirectQueryProvider(WeatherProvider):
    """weatherstack: one call by free-text query, authenticated by access key."""

    name = "weatherstack"
    classifier = WEATHERSTACK_CLASSIFIER
    wind_speed_unit = "km/h"  # units=m

    base_url = "http://api.weatherstack.com/current"

    def __init__(self, access_key: Optional[str], base_url: Optional[str] = None, **kwargs) -> None:
        if not access_key:
            raise ImproperlyConfigured("WEATHERSTACK_ACCESS_KEY is required for the weatherstack provider")
        super().__init__(**kwargs)
        self.access_key = access_key
        self.base_url = base_url or self.base_url

    def resolve(self, location: str) -> NormalizedWeather:
        params = {"access_key": self.access_key, "query": location, "units": "m"}
        response = self._request("GET", self.base_url, params=params)
        data = self._json(response)

        error = data.get("error")
        if error:
            info = error.get("info") if isinstance(error, dict) else None
            self._log.warning("weatherstack error for %r: %s", location, error)
            raise NotFound(f"provider error for {location!r}", info)

        place = data.get("location")
        current = data.get("current")
        if not isinstance(place, dict) or not isinstance(current, dict):
            raise UpstreamUnavailable("missing location or current node")

        code = require_code(current, "weather_code")
        return NormalizedWeather(
            location_name=place.get("name") or location,
            country_code=place.get("country") or "",
            temperature_c=require_number(current, "temperature"),
            humidity_percent=optional_number(current, "humidity"),
            wind_speed=require_number(current, "wind_speed"),
            wind_speed_unit=self.wind_speed_unit,
            condition_code=code,
            description=_first_description(current.get("weather_descriptions")),
            icon=self.classifier.classify(code),
            provider=self.name,
        )


def _first_description(descriptions) -> str:
    if isinstance(descriptions, list) and descriptions and descriptions[0]:
        return str(descriptions[0])
    return NOT_AVAILABLE


__all__ = ["DirectQueryProvider"]
