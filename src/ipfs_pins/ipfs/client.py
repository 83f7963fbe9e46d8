"""Kubo RPC client - dispatches commands to /api/v0/ over HTTP."""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress
from typing import TYPE_CHECKING

import httpx

from ipfs_pins.errors import CommandCancelledError, RemoteCommandError
from ipfs_pins.models.config import ClientConfig

if TYPE_CHECKING:
    from ipfs_pins.ipfs.pins import PinApi

log = logging.getLogger(__name__)


class KuboClient:
    """Issues RPC commands against a Kubo node.

    Every command is a POST to ``{api_url}/api/v0/{command}`` with the
    argument and options in the query string. The response body is
    returned as text; callers own the parsing.
    """

    def __init__(
        self,
        api_url: str = "http://127.0.0.1:5001",
        timeout: int = 60,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = api_url.rstrip("/")
        self._timeout = timeout
        self._client = client
        self._owns_client = client is None

    @classmethod
    def from_config(cls, cfg: ClientConfig) -> KuboClient:
        return cls(cfg.api_url, cfg.timeout)

    @property
    def api_url(self) -> str:
        return self._base_url

    @property
    def pin(self) -> PinApi:
        """Pin management commands bound to this client."""
        from ipfs_pins.ipfs.pins import PinApi

        return PinApi(self)

    def _url(self, command: str) -> str:
        return f"{self._base_url}/api/v0/{command}"

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout, connect=10),
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> KuboClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def do_command(
        self,
        command: str,
        cancel: asyncio.Event | None = None,
        arg: str | None = None,
        *options: str,
    ) -> str:
        """Run ``command`` and return the response body.

        ``options`` are ``name=value`` strings appended to the query in
        order. If ``cancel`` is set before the response arrives the request
        is abandoned and CommandCancelledError is raised.
        """
        if cancel is not None and cancel.is_set():
            raise CommandCancelledError(command)

        params: list[tuple[str, str]] = []
        if arg is not None:
            params.append(("arg", arg))
        for opt in options:
            name, _, value = opt.partition("=")
            params.append((name, value))

        log.debug("POST %s %s", command, params)
        if cancel is None:
            return await self._send(command, params)

        request = asyncio.ensure_future(self._send(command, params))
        waiter = asyncio.ensure_future(cancel.wait())
        try:
            await asyncio.wait(
                {request, waiter}, return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            # Reached with the request still pending on either a cancel
            # signal or cancellation of the calling task.
            waiter.cancel()
            if not request.done():
                request.cancel()
                with suppress(asyncio.CancelledError):
                    await request

        if request.cancelled():
            log.info("%s cancelled by caller", command)
            raise CommandCancelledError(command)
        return request.result()

    async def _send(self, command: str, params: list[tuple[str, str]]) -> str:
        try:
            resp = await self._http().post(self._url(command), params=params)
        except httpx.HTTPError as exc:
            log.error("%s failed: %s", command, exc)
            raise RemoteCommandError(command, str(exc) or type(exc).__name__) from exc

        if resp.status_code >= 400:
            message = _error_message(resp)
            log.warning("%s returned HTTP %d: %s", command, resp.status_code, message)
            raise RemoteCommandError(command, message, resp.status_code)
        return resp.text


def _error_message(resp: httpx.Response) -> str:
    """Pull the daemon's error text out of a failed response."""
    try:
        data = resp.json()
    except ValueError:
        return resp.text[:200] or resp.reason_phrase
    if isinstance(data, dict) and data.get("Message"):
        return str(data["Message"])
    return resp.text[:200]
