class Active24Error(Exception):
    """Base class for every failure raised by active24dns."""


class ConfigurationError(Active24Error):
    pass


class DomainParseError(Active24Error):
    pass


class DecodeError(Active24Error):
    pass


class APIError(Active24Error):
    """The Active24 API answered with a status code we don't accept."""

    retryable = False

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(APIError):
    pass


class RecordNotFoundError(APIError):
    pass


class AuthenticationError(APIError):
    pass


class NotAuthorizedError(APIError):
    pass


class RateLimitedError(APIError):
    retryable = True


class ServerError(APIError):
    retryable = True


class UnhandledResponseError(APIError):
    def __init__(self, response):
        request = response.request
        if request is not None:
            request_description = f"{request.method} {request.url}"
        else:
            request_description = "unknown"
        super().__init__(
            f"unhandled http status response. Status code: {response.status_code}\n"
            f" Response: {response.text}\n"
            f" Request: {request_description}\n",
            response.status_code,
        )
