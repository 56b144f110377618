"""Base client for the forum host API."""

from typing import Any

import requests
import structlog
from asgiref.sync import sync_to_async

from core.config.downstream_urls import FORUM_API_BASE_URL, FORUM_API_TOKEN
from core.constants import REQUEST_ID_HEADER
from core.exceptions import DownstreamServiceError, DownstreamServiceUnavailableError
from core.logging.context import get_request_id

logger = structlog.get_logger(__name__)

FORUM_REQUEST_TIMEOUT = 10  # seconds


class BaseDownstreamClient:
    """Shared plumbing of the forum API clients.

    Calls are plain ``requests`` calls. Subclasses expose coroutines built on
    ``_arequest_json``, which runs the call on a worker thread so the mention
    pipeline can await many lookups at once.

    A 404 from the forum means "no such user/group/post" and is returned as
    ``None``; other 4xx answers raise ``DownstreamServiceError`` and 5xx
    answers raise ``DownstreamServiceUnavailableError``. Timeouts and
    connection errors propagate unchanged.
    """

    def __init__(
        self,
        service_name: str,
        base_url: str = FORUM_API_BASE_URL,
        api_token: str = FORUM_API_TOKEN,
    ):
        self.service_name = service_name
        self.base_url = base_url.rstrip("/")
        self.api_token = api_token
        self.timeout = FORUM_REQUEST_TIMEOUT

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_token:
            headers["Authorization"] = f"Bearer {self.api_token}"
        request_id = get_request_id()
        if request_id:
            headers[REQUEST_ID_HEADER] = request_id
        return headers

    def _check_status(self, method: str, response: requests.Response) -> None:
        code = response.status_code
        if code < 400 or code == 404:
            return

        log = logger.bind(
            service=self.service_name,
            method=method,
            url=response.url,
            status_code=code,
            response_text=response.text[:500],
        )
        if code >= 500:
            log.error("forum_server_error")
            raise DownstreamServiceUnavailableError(self.service_name, code)

        log.error("forum_request_rejected")
        raise DownstreamServiceError(
            f"forum API {self.service_name} answered {code}: {response.text}",
            service_name=self.service_name,
            status_code=code,
        )

    def _request_json(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_data: Any = None,
    ) -> Any:
        """Call the forum API and decode the JSON answer.

        Args:
            method: HTTP method
            path: Path relative to the forum API base URL
            params: Query parameters
            json_data: JSON body

        Returns:
            Decoded body, ``{}`` for an empty body, None on 404
        """
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug(
            "forum_request", service=self.service_name, method=method, url=url
        )

        try:
            response = requests.request(
                method,
                url,
                headers=self._headers(),
                params=params,
                json=json_data,
                timeout=self.timeout,
            )
        except (requests.Timeout, requests.ConnectionError) as e:
            logger.error(
                "forum_unreachable",
                service=self.service_name,
                method=method,
                url=url,
                error=str(e),
            )
            raise

        self._check_status(method, response)
        if response.status_code == 404:
            return None
        return response.json() if response.content else {}

    async def _arequest_json(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json_data: Any = None,
    ) -> Any:
        """Awaitable ``_request_json`` running on a worker thread."""
        return await sync_to_async(self._request_json, thread_sensitive=False)(
            method, path, params=params, json_data=json_data
        )


def as_uids(values: Any) -> list[int]:
    """Coerce a forum uid list (ints or numeric strings) into ints."""
    return [int(value) for value in values or [] if value not in (None, "", 0, "0")]
