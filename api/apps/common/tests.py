"""Tests for logging and exception handling shared across applications."""

# Standard library imports
import logging

# Third-party imports
from django.test import SimpleTestCase
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.test import APIRequestFactory

# Application imports
from apps.common.exceptions import custom_exception_handler
from apps.common.logger import LOG_FORMAT, LoggerFactory


class LoggerFactoryTests(SimpleTestCase):
    """Test cases for the logger factory."""

    def test_get_logger(self):
        """Asserts that loggers are configured with the requested level."""
        logger = LoggerFactory.get("TEST_COMMON_LEVEL", "DEBUG")

        self.assertEqual(logger.level, logging.DEBUG)
        self.assertFalse(logger.propagate)
        self.assertEqual(logger.handlers[0].formatter._fmt, LOG_FORMAT)

    def test_get_logger_repeatedly(self):
        """Asserts that requesting a logger twice does not duplicate output."""
        first = LoggerFactory.get("TEST_COMMON_REPEAT")
        second = LoggerFactory.get("TEST_COMMON_REPEAT", logging.WARNING)

        self.assertIs(first, second)
        self.assertEqual(len(second.handlers), 1)
        self.assertEqual(second.level, logging.WARNING)


class CustomExceptionHandlerTests(SimpleTestCase):
    """Test cases for the REST framework exception handler."""

    def setUp(self):
        self.context = {"request": APIRequestFactory().get("/"), "view": None}

    def test_handle_api_exception(self):
        """Asserts that framework errors are wrapped in a message envelope."""
        response = custom_exception_handler(NotFound("Missing."), self.context)

        self.assertEqual(response.status_code, 404)
        self.assertJSONEqual(response.content, {"message": "Missing."})

    def test_handle_structured_detail(self):
        """Asserts that non-string details fall back to the exception text."""
        exc = ValidationError({"swiftCode": ["Required."]})
        response = custom_exception_handler(exc, self.context)

        self.assertEqual(response.status_code, 400)
        self.assertJSONEqual(response.content, {"message": str(exc)})

    def test_ignore_unknown_exception(self):
        """Asserts that other exceptions are left for Django to handle."""
        self.assertIsNone(custom_exception_handler(KeyError("x"), self.context))
