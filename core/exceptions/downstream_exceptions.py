"""Errors raised by the forum host API clients."""


class DownstreamServiceError(Exception):
    """The forum host API refused a request (4xx other than 404)."""

    def __init__(
        self,
        message: str,
        service_name: str | None = None,
        status_code: int | None = None,
    ):
        self.service_name = service_name
        self.status_code = status_code
        super().__init__(message)


class DownstreamServiceUnavailableError(DownstreamServiceError):
    """The forum host API failed to answer (5xx).

    Mention dispatch jobs failing with this error can be retried as is.
    """

    def __init__(self, service_name: str, status_code: int, message: str | None = None):
        super().__init__(
            message=message or f"forum API {service_name} answered {status_code}",
            service_name=service_name,
            status_code=status_code,
        )
