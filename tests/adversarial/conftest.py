"""
Shared fixtures for adversarial tests.

Provides a registration gateway that blocks until released, so tests can
overlap submissions deterministically.
"""

import asyncio

import pytest

from src.domain.ports import RegistrationPayload, RegistrationResponse

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


class BlockingRegistrationGateway:
    """Registration gateway that waits on an event before answering."""

    def __init__(self, response: RegistrationResponse) -> None:
        self.response = response
        self.calls: list[RegistrationPayload] = []
        self.release = asyncio.Event()

    async def register(self, payload: RegistrationPayload) -> RegistrationResponse:
        self.calls.append(payload)
        await self.release.wait()
        return self.response


@pytest.fixture
def blocking_gateway_factory():
    """Build a BlockingRegistrationGateway inside the running event loop."""
    return BlockingRegistrationGateway
