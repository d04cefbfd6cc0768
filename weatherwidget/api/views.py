"""Views presenting the weather lookup widget."""
from __future__ import annotations

from dataclasses import asdict
from functools import lru_cache
from typing import Any, Dict, Optional

from django.conf import settings
from django.views.generic import TemplateView
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from weatherwidget.core.entities import LookupState
from weatherwidget.core.providers import DirectQueryProvider, RequestConfig, WeatherProvider, build_provider
from weatherwidget.core.services.lookup import WeatherLookup


def provider_from_settings(name: Optional[str] = None) -> WeatherProvider:
    name = name or settings.WEATHER_PROVIDER
    options: Dict[str, Any] = {"request_config": RequestConfig(timeout=settings.WEATHER_REQUEST_TIMEOUT)}
    if name == DirectQueryProvider.name:
        options["access_key"] = settings.WEATHERSTACK_ACCESS_KEY
    return build_provider(name, **options)


@lru_cache(maxsize=1)
def get_weather_provider() -> WeatherProvider:
    return provider_from_settings()


def make_lookup(provider: Optional[WeatherProvider] = None) -> WeatherLookup:
    return WeatherLookup(
        provider or get_weather_provider(),
        default_location=settings.WEATHER_DEFAULT_LOCATION,
    )


def serialize_state(state: LookupState) -> Dict[str, Any]:
    weather = state.weather
    payload: Optional[Dict[str, Any]] = None
    if weather is not None:
        payload = asdict(weather)
        payload["icon"] = weather.icon.value
    return {
        "location": state.location,
        "status": state.status,
        "weather": payload,
        "error": state.error,
    }


class WeatherView(APIView):
    """Resolve ``?location=`` to current conditions."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the widget state after looking up the requested location."""
        location = (request.query_params.get("location") or "").strip()
        if not location:
            return Response({"detail": "location query parameter is required"}, status=status.HTTP_400_BAD_REQUEST)

        lookup = make_lookup()
        lookup.fetch(location)
        return Response(serialize_state(lookup.state), status=status.HTTP_200_OK)


class WidgetView(TemplateView):
    """Search form plus the latest result, rendered server side."""

    template_name = "weatherwidget/widget.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        lookup = make_lookup()
        location = self.request.GET.get("location")
        if location is None:
            lookup.mount()
        else:
            lookup.fetch(location.strip())
        context["state"] = lookup.state
        context["weather"] = lookup.state.weather
        context["error"] = lookup.state.error
        return context
