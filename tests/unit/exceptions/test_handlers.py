"""Unit tests for exception handlers."""

from unittest.mock import Mock, patch

from django.http import Http404
from django.test import SimpleTestCase

import requests
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.views import APIView

from core.exceptions import (
    DownstreamServiceError,
    DownstreamServiceUnavailableError,
    MentionDispatchError,
)
from core.exceptions.handlers import custom_exception_handler


class TestCustomExceptionHandler(SimpleTestCase):
    """Test cases for custom exception handler."""

    def setUp(self):
        """Set up test fixtures."""
        request = Mock()
        request.path = "/api/v1/mentions/parse"
        request.method = "POST"
        request.META = {"REMOTE_ADDR": "127.0.0.1"}
        view = Mock(spec=APIView)
        view.request = request
        self.context = {"view": view, "request": request}

    @patch("core.exceptions.handlers.get_request_id", return_value="req-1")
    def test_forum_unavailable_maps_to_503(self, _mock_request_id):
        """Test forum server errors give 503."""
        exc = DownstreamServiceUnavailableError("forum-identity", 502)

        response = custom_exception_handler(exc, self.context)

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.data["status"], 503)
        self.assertEqual(response.data["request_id"], "req-1")
        self.assertEqual(response["X-Request-ID"], "req-1")

    @patch("core.exceptions.handlers.get_request_id", return_value=None)
    def test_forum_timeout_maps_to_503(self, _mock_request_id):
        """Test timeouts talking to the forum give 503."""
        response = custom_exception_handler(requests.Timeout(), self.context)

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)

    @patch("core.exceptions.handlers.get_request_id", return_value=None)
    def test_forum_rejection_maps_to_502(self, _mock_request_id):
        """Test forum client errors give 502."""
        exc = DownstreamServiceError("bad", service_name="forum-topics", status_code=400)

        response = custom_exception_handler(exc, self.context)

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)

    @patch("core.exceptions.handlers.get_request_id", return_value=None)
    def test_drf_validation_error(self, _mock_request_id):
        """Test DRF's own exceptions keep their status."""
        response = custom_exception_handler(ValidationError("bad"), self.context)

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    @patch("core.exceptions.handlers.get_request_id", return_value=None)
    def test_http404(self, _mock_request_id):
        """Test Django's Http404 gives 404."""
        response = custom_exception_handler(Http404("gone"), self.context)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    @patch("core.exceptions.handlers.get_request_id", return_value=None)
    def test_unexpected_error_maps_to_500(self, _mock_request_id):
        """Test anything else gives 500."""
        response = custom_exception_handler(
            MentionDispatchError(100, ["user"]), self.context
        )

        self.assertEqual(
            response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        self.assertEqual(response.data["message"], "An internal server error occurred.")
