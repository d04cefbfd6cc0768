from __future__ import annotations

import pytest

from weatherwidget.core.providers import GeoForecastProvider

from .payloads import FORECAST_URL, GEO_URL, LONDON_FORECAST, LONDON_GEOCODING


@pytest.fixture
def geo_provider() -> GeoForecastProvider:
    return GeoForecastProvider(geocoding_url=GEO_URL, forecast_url=FORECAST_URL)


@pytest.fixture
def london(requests_mock):
    requests_mock.get(GEO_URL, json=LONDON_GEOCODING)
    requests_mock.get(FORECAST_URL, json=LONDON_FORECAST)
    return requests_mock
