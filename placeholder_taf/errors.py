"""Errors raised by the endpoint wrappers."""


class EndpointError(Exception):
    """Base class for endpoint wrapper failures."""


class UnexpectedStatusError(EndpointError, AssertionError):
    """Response status code did not match the expected one.

    Subclasses AssertionError so pytest reports it as a test failure.
    """

    BODY_PREVIEW = 200

    def __init__(self, expected: int, actual: int, method: str, url: str, body: str = ""):
        self.expected = expected
        self.actual = actual
        self.method = method
        self.url = url
        self.body = body
        super().__init__(
            f"{method} {url}: expected status {expected}, got {actual}. "
            f"Body: {body[:self.BODY_PREVIEW]}"
        )


class ResponseBodyError(EndpointError):
    """Response body is not JSON or does not have the expected shape."""


class RequestSpecError(EndpointError, ValueError):
    """Path template could not be resolved."""
