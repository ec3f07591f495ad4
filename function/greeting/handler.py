"""
Lambda entry point for the greeting endpoint.

``handle`` holds all request logic and works on plain text, so it can be
called and tested without any Lambda types. ``lambda_handler`` is the thin
adapter registered with the runtime: it pulls the body out of the API
Gateway proxy event and renders the response envelope.
"""

import base64
import binascii
from typing import Any, Dict, Optional

from .errors import GreetingError, MalformedInputError
from .logging_utils import get_logger, log_lambda_context, performance_timer
from .models import IncomingEvent, OutgoingResponse

GREETING_TEMPLATE = "Hello there, {name}"

logger = get_logger(__name__)


def handle(raw_body: str) -> OutgoingResponse:
    """
    Turn a raw request body into a greeting response.

    Args:
        raw_body: Request body text, expected to be ``{"name": "<string>"}``

    Returns:
        OutgoingResponse: 200 with the greeting, or 400 naming the problem
    """
    logger.diagnostic("Request body is", body=raw_body)

    try:
        name = IncomingEvent.from_json(raw_body).require_name()
    except GreetingError as e:
        logger.warning("Rejected request",
                       error=str(e), error_type=type(e).__name__)
        return OutgoingResponse.error(e.status_code, e.message)

    return OutgoingResponse.ok(GREETING_TEMPLATE.format(name=name))


def extract_body(event: Any) -> Optional[str]:
    """
    Pull the request body out of an API Gateway proxy event.

    Works for both REST (v1) and HTTP API (v2) payloads. A missing body is
    returned as an empty string.

    Returns:
        The body text, or None if a base64 encoded body could not be decoded
    """
    if not isinstance(event, dict):
        return ""

    body = event.get('body')
    if body is None:
        return ""

    if event.get('isBase64Encoded') and isinstance(body, str):
        try:
            return base64.b64decode(body, validate=True).decode('utf-8')
        except (binascii.Error, UnicodeDecodeError) as e:
            logger.warning("Could not decode base64 request body",
                           error=str(e), error_type=type(e).__name__)
            return None

    return body


@performance_timer("lambda_handler")
def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for API Gateway proxy events.

    Args:
        event: API Gateway proxy event
        context: Lambda context object (may be None for local calls)

    Returns:
        Dict[str, Any]: Response envelope with statusCode, headers and body
    """
    log_lambda_context(logger, context)

    body = extract_body(event)
    if body is None:
        return OutgoingResponse.error(400, MalformedInputError.message).to_dict()

    return handle(body).to_dict()
