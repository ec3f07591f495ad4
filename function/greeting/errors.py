"""
Exception types for the greeting function.

Both failure kinds are client errors: they are raised while reading the
request body and converted into a 400 response at the handler boundary.
"""


class GreetingError(Exception):
    """Base exception for request errors the handler answers with a response."""

    status_code = 400
    message = "Bad request"

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.message)
        self.detail = detail


class MalformedInputError(GreetingError):
    """Raised when the request body is not JSON of the expected shape."""

    message = "Unable to unmarshal JSON"


class MissingFieldError(GreetingError):
    """Raised when the request body has no usable name."""

    message = "Please provide a name"
