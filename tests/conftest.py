"""Root-level pytest fixtures for all tests.

Provides:
- Sandbox test credentials
- A session manager and invoker wired to the fake binding factory
"""

from typing import Any

import pytest

from aramex.services.soap_client import SoapMethodInvoker
from aramex.services.soap_session import SoapSessionManager
from tests.helpers import TEST_CREDENTIALS, FakeBindingFactory


@pytest.fixture
def credentials() -> dict[str, Any]:
    """Fresh copy of the sandbox credentials."""
    return dict(TEST_CREDENTIALS)


@pytest.fixture
def binding_factory() -> FakeBindingFactory:
    return FakeBindingFactory()


@pytest.fixture
def session(credentials, binding_factory) -> SoapSessionManager:
    """Session manager using the fake binding factory."""
    return SoapSessionManager(credentials, binding_factory=binding_factory)


@pytest.fixture
def invoker(session) -> SoapMethodInvoker:
    return SoapMethodInvoker(session)
