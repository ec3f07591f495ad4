"""
Greeting function - a single-endpoint AWS Lambda function.

The function reads ``{"name": "..."}`` from an API Gateway request body and
answers with ``Hello there, <name>`` wrapped in a JSON HTTP response envelope.
"""

__version__ = "1.0.0"

from .errors import GreetingError, MalformedInputError, MissingFieldError
from .models import IncomingEvent, OutgoingResponse
from .handler import handle, lambda_handler

__all__ = [
    "GreetingError",
    "MalformedInputError",
    "MissingFieldError",
    "IncomingEvent",
    "OutgoingResponse",
    "handle",
    "lambda_handler"
]
