"""URL routing configuration for core application."""

from django.urls import path

from .views import (
    CleanContentView,
    GroupListView,
    LivenessCheckView,
    ParseContentView,
    PostCreatedView,
    ReadinessCheckView,
    TopicUsersView,
    UserSearchView,
)

urlpatterns = [
    # Health check endpoints
    path("health/live", LivenessCheckView.as_view(), name="health-live"),
    path("health/ready", ReadinessCheckView.as_view(), name="health-ready"),
    # Notification dispatch
    path("posts", PostCreatedView.as_view(), name="post-created"),
    # Content endpoints
    path("parse", ParseContentView.as_view(), name="parse-content"),
    path("clean", CleanContentView.as_view(), name="clean-content"),
    # Autocomplete endpoints
    path("groups", GroupListView.as_view(), name="group-list"),
    path(
        "topics/<int:tid>/users",
        TopicUsersView.as_view(),
        name="topic-users",
    ),
    path("users/search", UserSearchView.as_view(), name="user-search"),
]
