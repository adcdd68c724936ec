"""Test helper utilities."""

from tests.helpers.fake_binding import (
    TEST_CREDENTIALS,
    FakeBindingFactory,
    error_response,
    ok_response,
)

__all__ = [
    "TEST_CREDENTIALS",
    "FakeBindingFactory",
    "error_response",
    "ok_response",
]
