"""Thin async wrapper for fetching JSON documents over HTTP."""

from __future__ import annotations

from typing import Any

import httpx

from ci_demo_utils.utils.logger import get_logger

logger = get_logger(__name__)


async def fetch_data(url: str, *, client: httpx.AsyncClient | None = None) -> Any:
    """GET ``url`` and return the decoded JSON body.

    Transport and decoding errors propagate unchanged; the status code is not
    inspected. A provided ``client`` is reused and left open.
    """
    logger.debug("Fetching JSON document", url=url)

    if client is not None:
        response = await client.get(url)
        return response.json()

    async with httpx.AsyncClient(timeout=None) as owned_client:
        response = await owned_client.get(url)
        return response.json()
