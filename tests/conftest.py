"""Root conftest: shared test configuration and HTTP client fixtures.

Invariants:
    - Every API test talks to the real FastAPI app over ASGITransport
    - fake_client swaps the instruction builder via dependency_overrides and
      restores it afterwards
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient
from solders.keypair import Keypair

# Plain-text logs keep pytest's captured output readable
os.environ.setdefault("LOG_FORMAT", "text")

from solbridge.api.dependencies import get_instruction_builder  # noqa: E402
from solbridge.main import app  # noqa: E402
from tests.fakes import FakeInstructionBuilder  # noqa: E402


@pytest.fixture
async def client():
    """Client against the app wired to the real SPL instruction builder."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def fake_builder() -> FakeInstructionBuilder:
    return FakeInstructionBuilder()


@pytest.fixture
async def fake_client(fake_builder):
    """Client whose instruction builder is the recording fake."""
    app.dependency_overrides[get_instruction_builder] = lambda: fake_builder
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def keypair() -> Keypair:
    return Keypair()


@pytest.fixture
def address() -> str:
    """A fresh valid base58 address."""
    return str(Keypair().pubkey())
