"""API views for core application."""

from asgiref.sync import async_to_sync

import django_rq
import structlog
from pydantic import ValidationError
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.config.mentions_settings import load_mentions_settings
from core.constants import MENTIONS_QUEUE_NAME
from core.schemas.mention import (
    CleanContentRequest,
    ContentResponse,
    DispatchQueuedResponse,
    GroupListResponse,
    ParseContentRequest,
    PostData,
    UserListResponse,
    UserSearchRequest,
)
from core.services import health_service
from core.services.mention_parser_service import mention_parser_service
from core.services.mention_search_service import mention_search_service

logger = structlog.get_logger(__name__)


def _bad_request(e: ValidationError) -> Response:
    return Response(
        {
            "error": "bad_request",
            "message": "Invalid request parameters",
            "errors": e.errors(include_url=False, include_context=False),
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


class MentionsAPIView(APIView):
    """Base view for the internal mentions endpoints.

    Callers are the forum host and its workers; authentication is handled
    upstream.
    """

    authentication_classes = ()
    permission_classes = (AllowAny,)


class LivenessCheckView(MentionsAPIView):
    """Liveness probe endpoint for Kubernetes.

    Returns 200 if the service is alive and running.
    This should not check external dependencies.
    """

    def get(self, _request):
        """Handle GET request for liveness check."""
        liveness = health_service.get_liveness_status()
        return Response(liveness.model_dump(), status=status.HTTP_200_OK)


class ReadinessCheckView(MentionsAPIView):
    """Readiness probe endpoint for Kubernetes.

    Returns degraded status (200 OK) when the database or Redis is
    unavailable, allowing the service to stay alive meanwhile.
    """

    def get(self, _request):
        """Handle GET request for readiness check."""
        readiness = health_service.get_readiness_status()
        return Response(readiness.model_dump(), status=status.HTTP_200_OK)


class PostCreatedView(MentionsAPIView):
    """API endpoint receiving post-created events.

    Queues the mention notification dispatch for the post.
    """

    def post(self, request):
        """Handle POST request for a newly created post.

        Args:
            request: HTTP request object containing pid, tid, uid, cid and
                content

        Returns:
            202 Accepted with DispatchQueuedResponse if queued
            400 Bad Request if validation fails
        """
        try:
            post = PostData.model_validate(request.data)
        except ValidationError as e:
            logger.warning(
                "Invalid request body for post created event",
                validation_errors=e.errors(),
            )
            return _bad_request(e)

        queue = django_rq.get_queue(MENTIONS_QUEUE_NAME)
        job = queue.enqueue(
            "core.jobs.mention_jobs.dispatch_mentions_job",
            post.model_dump(),
        )

        logger.info("Mention dispatch queued", post_id=post.pid, job_id=job.id)

        response = DispatchQueuedResponse(
            post_id=post.pid,
            job_id=job.id,
            message="Mention notifications queued for processing",
        )
        return Response(
            response.model_dump(by_alias=True), status=status.HTTP_202_ACCEPTED
        )


class ParseContentView(MentionsAPIView):
    """API endpoint rewriting mentions of rendered content into links."""

    def post(self, request):
        """Handle POST request to parse post content.

        Returns:
            200 OK with ContentResponse
            400 Bad Request if validation fails
            502/503 if the forum cannot be queried
        """
        try:
            parse_request = ParseContentRequest.model_validate(request.data)
        except ValidationError as e:
            return _bad_request(e)

        content = async_to_sync(mention_parser_service.parse_post)(
            parse_request.content, load_mentions_settings()
        )
        response = ContentResponse(content=content or "")
        return Response(response.model_dump(by_alias=True), status=status.HTTP_200_OK)


class CleanContentView(MentionsAPIView):
    """API endpoint removing code and blockquotes from content."""

    def post(self, request):
        """Handle POST request to clean post content."""
        try:
            clean_request = CleanContentRequest.model_validate(request.data)
        except ValidationError as e:
            return _bad_request(e)

        content = mention_parser_service.clean(
            clean_request.content,
            clean_request.is_markdown,
            clean_request.strip_blockquote,
            clean_request.strip_code,
        )
        response = ContentResponse(content=content)
        return Response(response.model_dump(by_alias=True), status=status.HTTP_200_OK)


class GroupListView(MentionsAPIView):
    """API endpoint listing group names for mention autocomplete."""

    def get(self, _request):
        """Handle GET request for mentionable groups."""
        groups = async_to_sync(mention_search_service.list_groups)(
            load_mentions_settings()
        )
        response = GroupListResponse(groups=groups)
        return Response(response.model_dump(by_alias=True), status=status.HTTP_200_OK)


class TopicUsersView(MentionsAPIView):
    """API endpoint listing the users who posted in a topic."""

    def get(self, _request, tid: int):
        """Handle GET request for topic participants."""
        users = async_to_sync(mention_search_service.get_topic_users)(
            tid, load_mentions_settings()
        )
        response = UserListResponse(users=users)
        return Response(response.model_dump(by_alias=True), status=status.HTTP_200_OK)


class UserSearchView(MentionsAPIView):
    """API endpoint searching users for mention autocomplete."""

    def post(self, request):
        """Handle POST request to search mentionable users.

        Returns:
            200 OK with UserListResponse
            400 Bad Request if validation fails
        """
        try:
            search_request = UserSearchRequest.model_validate(request.data)
        except ValidationError as e:
            logger.warning(
                "Invalid request body for user search",
                validation_errors=e.errors(),
            )
            return _bad_request(e)

        users = async_to_sync(mention_search_service.search_users)(
            search_request, load_mentions_settings()
        )
        response = UserListResponse(users=users)
        return Response(response.model_dump(by_alias=True), status=status.HTTP_200_OK)
