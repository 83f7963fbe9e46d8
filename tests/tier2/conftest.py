"""Tier 2 fixtures: real Kubo daemon."""

from __future__ import annotations

import uuid

import httpx
import pytest

from ipfs_pins.ipfs.client import KuboClient
from tests.conftest import make_test_config


@pytest.fixture(scope="session")
def kubo_available():
    """Check if local Kubo daemon is running. Skip tier2 tests if not."""
    try:
        r = httpx.post("http://127.0.0.1:5001/api/v0/id", timeout=3)
        if r.status_code == 200:
            return True
        pytest.skip("Kubo daemon not available at localhost:5001")
    except (httpx.ConnectError, httpx.TimeoutException):
        pytest.skip("Kubo daemon not available at localhost:5001")


@pytest.fixture
async def real_client(kubo_available):
    """Real KuboClient for Tier 2 tests."""
    cfg = make_test_config()
    async with KuboClient.from_config(cfg) as client:
        yield client


@pytest.fixture
async def unpinned_cid(kubo_available):
    """Add unique content to Kubo without pinning it.

    Returns the CID. Any pin left by the test is removed on teardown.
    """
    content = f"ipfs-pins-test-{uuid.uuid4()}".encode()
    async with httpx.AsyncClient() as client:
        resp = await client.post(
            "http://127.0.0.1:5001/api/v0/add",
            params={"pin": "false"},
            files={"file": ("test.txt", content)},
        )
        cid = resp.json()["Hash"]
        yield cid
        await client.post(
            "http://127.0.0.1:5001/api/v0/pin/rm",
            params={"arg": cid},
        )
