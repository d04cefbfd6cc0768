from __future__ import annotations

import pytest
from django.test import Client

from weatherwidget.api import views
from weatherwidget.core.entities import GENERIC_ERROR_MESSAGE

from .payloads import FORECAST_URL, GEO_URL, LONDON_GEOCODING


@pytest.fixture(autouse=True)
def _provider(monkeypatch, geo_provider):
    monkeypatch.setattr(views, "get_weather_provider", lambda: geo_provider)


def test_weather_endpoint_returns_payload(london) -> None:
    client = Client()
    response = client.get("/api/weather", {"location": "London"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ready"
    assert payload["error"] is None
    assert payload["location"] == "London"
    assert payload["weather"] == {
        "location_name": "London",
        "country_code": "United Kingdom",
        "temperature_c": 15,
        "humidity_percent": None,
        "wind_speed": 10,
        "wind_speed_unit": "km/h",
        "condition_code": 0,
        "description": "N/A",
        "icon": "clear",
        "provider": "open-meteo",
    }


def test_weather_endpoint_reports_lookup_error(requests_mock) -> None:
    requests_mock.get(GEO_URL, json={"results": []})
    client = Client()
    response = client.get("/api/weather", {"location": "Zzzzznotreal"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "error"
    assert payload["weather"] is None
    assert payload["error"] == "Location not found."


@pytest.mark.parametrize("params", [{}, {"location": "   "}])
def test_weather_endpoint_validates_params(params) -> None:
    client = Client()
    response = client.get("/api/weather", params)

    assert response.status_code == 400
    assert "detail" in response.json()


def test_widget_mounts_default_location(london) -> None:
    client = Client()
    response = client.get("/")

    assert response.status_code == 200
    body = response.content.decode("utf-8")
    assert 'value="London"' in body
    assert "London, United Kingdom" in body
    assert "15°C" in body
    assert "10 km/h" in body
    assert "N/A" in body
    assert london.request_history[0].qs["name"] == ["london"]


def test_widget_shows_error(requests_mock) -> None:
    requests_mock.get(GEO_URL, json={})
    client = Client()
    response = client.get("/", {"location": "Zzzzznotreal"})

    assert response.status_code == 200
    body = response.content.decode("utf-8")
    assert "Location not found." in body
    assert "conditions" not in body


def test_weather_endpoint_reports_non_finite_upstream_value(requests_mock) -> None:
    requests_mock.get(GEO_URL, json=LONDON_GEOCODING)
    requests_mock.get(FORECAST_URL, text='{"current_weather": {"temperature": 1e999, "windspeed": 10, "weathercode": 0}}')
    client = Client()
    response = client.get("/api/weather", {"location": "London"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "error"
    assert payload["error"] == GENERIC_ERROR_MESSAGE


@pytest.mark.parametrize("temperature, shown", [(-2.5, "-2°C"), (15.5, "16°C"), (-0.4, "0°C")])
def test_widget_rounds_temperature_half_up(requests_mock, temperature, shown) -> None:
    requests_mock.get(GEO_URL, json=LONDON_GEOCODING)
    requests_mock.get(FORECAST_URL, json={"current_weather": {"temperature": temperature, "windspeed": 4, "weathercode": 3}})
    client = Client()
    response = client.get("/", {"location": "London"})

    assert response.status_code == 200
    assert f'<span class="temperature">{shown}</span>' in response.content.decode("utf-8")
