"""CLI entry point for ipfs_pins."""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Awaitable, Callable

import click

from ipfs_pins.config import load_config
from ipfs_pins.errors import PinError
from ipfs_pins.ipfs.client import KuboClient
from ipfs_pins.ipfs.pins import PinApi
from ipfs_pins.models.config import ClientConfig
from ipfs_pins.models.pins import PinMode, PinnedObject


def _run(cfg: ClientConfig, call: Callable[[PinApi], Awaitable[list[PinnedObject]]]) -> list[PinnedObject]:
    """Run one pin command, exiting with status 1 on a PinError."""

    async def _go() -> list[PinnedObject]:
        async with KuboClient.from_config(cfg) as client:
            return await call(client.pin)

    try:
        return asyncio.run(_go())
    except PinError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """ipfs-pins - Manage the pinset of a Kubo IPFS node."""
    ctx.ensure_object(dict)
    cfg = load_config(config_path)
    ctx.obj["config"] = cfg

    level = logging.DEBUG if verbose else getattr(logging, cfg.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# ── Pins ───────────────────────────────────────────────


@cli.command()
@click.argument("path")
@click.option("--recursive/--no-recursive", default=True, help="Also pin linked objects")
@click.pass_context
def add(ctx: click.Context, path: str, recursive: bool) -> None:
    """Pin PATH (a CID or IPFS path) on the node."""
    pins = _run(ctx.obj["config"], lambda api: api.add(path, recursive))
    for p in pins:
        click.echo(f"pinned {p.id}")


@cli.command(name="ls")
@click.option(
    "--type", "mode",
    type=click.Choice([m.value for m in PinMode], case_sensitive=False),
    default=PinMode.ALL.value,
    help="Only list pins of this type",
)
@click.pass_context
def ls(ctx: click.Context, mode: str) -> None:
    """List pinned objects."""
    pins = _run(ctx.obj["config"], lambda api: api.list(PinMode.parse(mode)))
    for p in pins:
        click.echo(f"{p.id} {p.mode.value if p.mode else ''}")


@cli.command()
@click.argument("path")
@click.option("--recursive/--no-recursive", default=True, help="Also unpin linked objects")
@click.pass_context
def rm(ctx: click.Context, path: str, recursive: bool) -> None:
    """Remove the pin on PATH."""
    pins = _run(ctx.obj["config"], lambda api: api.remove(path, recursive))
    for p in pins:
        click.echo(f"unpinned {p.id}")


# ── Info ───────────────────────────────────────────────


@cli.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show the effective configuration."""
    cfg = ctx.obj["config"]
    click.echo(f"Kubo RPC:   {cfg.api_url}")
    click.echo(f"Timeout:    {cfg.timeout}s")
    click.echo(f"Log level:  {cfg.log_level}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
