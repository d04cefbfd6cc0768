"""Management command to look up weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from weatherwidget.api.views import get_weather_provider, make_lookup, provider_from_settings, serialize_state
from weatherwidget.core.entities import LookupFailure
from weatherwidget.core.providers import PROVIDERS


class Command(BaseCommand):
    help = "Fetch current weather for a location"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--location", type=str, help="Location name (defaults to WEATHER_DEFAULT_LOCATION)")
        parser.add_argument("--provider", choices=sorted(PROVIDERS), help="Override WEATHER_PROVIDER")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        provider_name = options.get("provider")
        provider = provider_from_settings(provider_name) if provider_name else get_weather_provider()

        lookup = make_lookup(provider)
        location = options.get("location")
        result = lookup.fetch(location) if location is not None else lookup.mount()

        self.stdout.write(json.dumps(serialize_state(lookup.state)))
        if isinstance(result, LookupFailure):
            raise CommandError(result.message)
