#!/usr/bin/env python
"""Create a Nvisy client and check that the API is reachable.

Usage:
    NVISY_API_KEY=... python scripts/basic_example.py
    python scripts/basic_example.py --api-key your-api-key --base-url http://localhost:8080
"""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import click
from loguru import logger

from nvisy_sdk import DEFAULT_BASE_URL, NvisyClient, NvisyConfig, NvisyError

logger.remove()
logger.add(sys.stderr, level="INFO", format="<level>{message}</level>")


async def check(config: NvisyConfig) -> None:
    async with NvisyClient(config) as client:
        logger.info(f"Client created: {client!r}")
        status = await client.health()
        logger.success(f"API {status.status.value} (version {status.version})")


@click.command()
@click.option("--api-key", envvar="NVISY_API_KEY", required=True, help="Nvisy API key")
@click.option("--base-url", envvar="NVISY_BASE_URL", default=DEFAULT_BASE_URL, show_default=True)
def cli(api_key: str, base_url: str) -> None:
    """Build a client and query the health endpoint."""
    try:
        asyncio.run(check(NvisyConfig.build(api_key, base_url=base_url)))
    except NvisyError as exc:
        logger.error(f"Request failed: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
