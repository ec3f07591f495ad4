"""
Tests for the greeting exception types.
"""

import unittest

from greeting.errors import GreetingError, MalformedInputError, MissingFieldError


class TestGreetingErrors(unittest.TestCase):
    """Test custom exception classes."""

    def test_greeting_error(self):
        error = GreetingError("Test error")
        self.assertIsInstance(error, Exception)
        self.assertEqual(str(error), "Test error")
        self.assertEqual(error.status_code, 400)

    def test_malformed_input_error(self):
        """Test MalformedInputError carries the unmarshal message."""
        error = MalformedInputError("Expecting value: line 1 column 1 (char 0)")
        self.assertIsInstance(error, GreetingError)
        self.assertEqual(error.status_code, 400)
        self.assertEqual(error.message, "Unable to unmarshal JSON")
        self.assertEqual(error.detail, "Expecting value: line 1 column 1 (char 0)")

    def test_missing_field_error(self):
        error = MissingFieldError()
        self.assertIsInstance(error, GreetingError)
        self.assertEqual(error.status_code, 400)
        self.assertEqual(error.message, "Please provide a name")
        self.assertEqual(str(error), "Please provide a name")
