"""Root URL configuration."""
from __future__ import annotations

from django.urls import include, path

from weatherwidget.api.views import WidgetView

urlpatterns = [
    path("", WidgetView.as_view(), name="widget"),
    path("api/", include("weatherwidget.api.urls")),
]
