from __future__ import annotations

from typing import Optional

from .base import NotFound, UpstreamUnavailable, WeatherProvider, require_code, require_number
from ..entities import NOT_AVAILABLE, GeoResolution, NormalizedWeather
from ..icons import WMO_CLASSIFIER


class GeoForecastProvider(WeatherProvider):
    """Open-Meteo: geocode the location, then ask for current weather there."""

    name = "open-meteo"
    classifier = WMO_CLASSIFIER
    not_found_message = "Location not found."
    unavailable_message = "Could not fetch weather data."
    wind_speed_unit = "km/h"

    geocoding_url = "https://geocoding-api.open-meteo.com/v1/search"
    forecast_url = "https://api.open-meteo.com/v1/forecast"

    def __init__(
        self,
        geocoding_url: Optional[str] = None,
        forecast_url: Optional[str] = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.geocoding_url = geocoding_url or self.geocoding_url
        self.forecast_url = forecast_url or self.forecast_url

    def resolve(self, location: str) -> NormalizedWeather:
        geo = self.geocode(location)
        current = self.current_weather(geo.latitude, geo.longitude)
        code = require_code(current, "weathercode")
        weather = NormalizedWeather(
            location_name=location,
            country_code=geo.country,
            temperature_c=require_number(current, "temperature"),
            humidity_percent=None,
            wind_speed=require_number(current, "windspeed"),
            wind_speed_unit=self.wind_speed_unit,
            condition_code=code,
            description=NOT_AVAILABLE,
            icon=self.classifier.classify(code),
            provider=self.name,
        )
        self._log.info("Resolved %r to %s, %s", location, geo.latitude, geo.longitude)
        return weather

    def geocode(self, location: str) -> GeoResolution:
        response = self._request("GET", self.geocoding_url, params={"name": location, "count": 1})
        results = self._json(response).get("results")
        if not results:
            raise NotFound(f"no geocoding match for {location!r}", self.not_found_message)
        first = results[0]
        if not isinstance(first, dict):
            raise UpstreamUnavailable("unexpected geocoding result")
        return GeoResolution(
            latitude=require_number(first, "latitude"),
            longitude=require_number(first, "longitude"),
            country=first.get("country") or "",
        )

    def current_weather(self, latitude: float, longitude: float) -> dict:
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current_weather": "true",
            "temperature_unit": "celsius",
            "windspeed_unit": "kmh",
            "precipitation_unit": "mm",
        }
        response = self._request("GET", self.forecast_url, params=params)
        current = self._json(response).get("current_weather")
        if not current:
            raise UpstreamUnavailable("missing current weather", self.unavailable_message)
        if not isinstance(current, dict):
            raise UpstreamUnavailable("unexpected current weather payload")
        return current


__all__ = ["GeoForecastProvider"]
