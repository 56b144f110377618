"""Root URL configuration for the mentions service."""

from django.urls import include, path

urlpatterns = [
    path("api/v1/mentions/", include("core.urls")),
]
