"""Shared fixtures for ipfs_pins tests."""

from __future__ import annotations

import pytest
from pytest_metadata.plugin import metadata_key

from ipfs_pins.ipfs.client import KuboClient
from ipfs_pins.ipfs.pins import PinApi
from ipfs_pins.models.config import ClientConfig

from tests.mocks import FakeKubo, MockDispatcher

KUBO_RPC_URL = "http://127.0.0.1:5001"

# Well-known CIDs from the IPFS docs
ABOUT_PATH = "QmXarR6rgkQ2fDSHjSY5nM2kuCXKYGViky5nohtwgF65Ec/about"
EMPTY_DIR_CID = "QmUNLLsPACCz1vLxQVkXqqLX5R1X345qqfHbsf67hvA3Nn"
HELLO_CID = "QmZTR5bcpQD7cFgTorqxZDYaew1Wqgfbd2ud9QqGPAkK2V"


# ── Report metadata ──────────────────────────────────────────────


def pytest_configure(config):
    """Add the Kubo endpoint to the HTML report Environment table."""
    meta = config.stash.setdefault(metadata_key, {})
    meta["Kubo RPC"] = KUBO_RPC_URL


def make_test_config(**overrides) -> ClientConfig:
    """Build a ClientConfig suitable for testing."""
    defaults = dict(
        api_url=KUBO_RPC_URL,
        timeout=5,
        log_level="debug",
    )
    defaults.update(overrides)
    return ClientConfig(**defaults)


@pytest.fixture
def test_config():
    """Default ClientConfig for tests."""
    return make_test_config()


@pytest.fixture
def mock_dispatcher():
    return MockDispatcher()


@pytest.fixture
def pin_api(mock_dispatcher):
    """PinApi wired to the in-memory dispatcher."""
    return PinApi(mock_dispatcher)


@pytest.fixture
async def fake_kubo():
    """Local HTTP server standing in for the Kubo RPC API."""
    server = FakeKubo()
    await server.start()
    yield server
    await server.stop()


@pytest.fixture
async def kubo_client(fake_kubo):
    """KuboClient pointed at the fake server."""
    client = KuboClient(fake_kubo.url, timeout=5)
    yield client
    await client.aclose()
