"""
Data models for the greeting function.

This module contains the request and response shapes handled by the
Lambda entry point.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .errors import MalformedInputError, MissingFieldError

JSON_HEADERS = {"Content-Type": "application/json"}

NAME_KEY = "name"

# Bodies nested deeper than this are rejected before parsing.
MAX_NESTING_DEPTH = 512


class _Members(list):
    """Key/value pairs of a decoded JSON object, in document order."""


class _Number(str):
    """Source text of a JSON number, kept unconverted."""


def _reject_constant(token: str) -> None:
    raise ValueError(f"invalid JSON constant: {token}")


def nesting_depth(text: str) -> int:
    """
    Return the deepest array/object nesting in a JSON text.

    Brackets inside string literals are not counted. The text does not
    have to be valid JSON.
    """
    depth = deepest = 0
    in_string = escaped = False
    for char in text:
        if in_string:
            if escaped:
                escaped = False
            elif char == '\\':
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        elif char in '[{':
            depth += 1
            deepest = max(deepest, depth)
        elif char in ']}':
            depth -= 1

    return deepest


def _name_from_members(members: _Members) -> Optional[str]:
    """
    Pick the name out of the top-level object's members.

    Keys match ``name`` case-insensitively and the last matching key with a
    non-null value wins.
    """
    name = None
    for key, value in members:
        if key.casefold() != NAME_KEY:
            continue
        if value is None:
            continue
        if not isinstance(value, str) or isinstance(value, _Number):
            raise MalformedInputError(f"{key} must be a string, got {type(value).__name__}")
        name = value

    return name


@dataclass(frozen=True)
class IncomingEvent:
    """Request body of a greeting call."""

    name: Optional[str] = None

    @classmethod
    def from_json(cls, raw_body: str) -> 'IncomingEvent':
        """
        Decode a request body.

        A top-level JSON null decodes to an empty event. Any other
        non-object value, or a name that is neither a string nor null,
        is rejected. Numbers are never converted, so ignored fields of
        any size decode.

        Args:
            raw_body: Raw request body text

        Returns:
            IncomingEvent: The decoded event

        Raises:
            MalformedInputError: If the body cannot be decoded into an event
        """
        if not isinstance(raw_body, str):
            raise MalformedInputError(f"body is {type(raw_body).__name__}, not text")

        if raw_body.count("[") + raw_body.count("{") > MAX_NESTING_DEPTH:
            depth = nesting_depth(raw_body)
            if depth > MAX_NESTING_DEPTH:
                raise MalformedInputError(f"nesting depth {depth} exceeds {MAX_NESTING_DEPTH}")

        try:
            data = json.loads(raw_body,
                              parse_int=_Number,
                              parse_float=_Number,
                              parse_constant=_reject_constant,
                              object_pairs_hook=_Members)
        except (ValueError, RecursionError) as e:
            raise MalformedInputError(str(e)) from e

        if data is None:
            return cls()

        if not isinstance(data, _Members):
            raise MalformedInputError(f"expected a JSON object, got {type(data).__name__}")

        return cls(name=_name_from_members(data))

    def require_name(self) -> str:
        """Return the name, raising MissingFieldError when it is empty or absent."""
        if not self.name:
            raise MissingFieldError("name is empty or absent")
        return self.name


@dataclass(frozen=True)
class OutgoingResponse:
    """Response envelope returned through the API Gateway proxy integration."""

    status_code: int
    body: str
    headers: Dict[str, str] = field(default_factory=lambda: dict(JSON_HEADERS))

    @classmethod
    def ok(cls, body: str) -> 'OutgoingResponse':
        return cls(status_code=200, body=body)

    @classmethod
    def error(cls, status_code: int, body: str) -> 'OutgoingResponse':
        return cls(status_code=status_code, body=body)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the dictionary shape the Lambda runtime serializes."""
        return {
            'statusCode': self.status_code,
            'headers': dict(self.headers),
            'body': self.body
        }
