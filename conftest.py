from __future__ import annotations

import os

import django
import pytest
import requests_mock as requests_mock_lib


os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "weatherwidget.settings")
os.environ.pop("WEATHERSTACK_ACCESS_KEY", None)
os.environ.pop("WEATHER_PROVIDER", None)

django.setup()


@pytest.fixture()
def requests_mock():
    with requests_mock_lib.Mocker() as mocker:
        yield mocker


@pytest.fixture(autouse=True)
def _reset_provider():
    from weatherwidget.api.views import get_weather_provider

    get_weather_provider.cache_clear()
    yield
    get_weather_provider.cache_clear()
