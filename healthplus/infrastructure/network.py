"""
Network stand-in.

Workflows await this instead of a real transport. It always succeeds after
the configured delay; no timeout or retry semantics are modelled.
"""

import asyncio
import logging

logger = logging.getLogger(__name__)


async def simulate_api(delay: float = 0.6, operation: str = "request") -> None:
    """
    Pretend to call the backend.

    Args:
        delay: Seconds to wait before completing
        operation: Label used in debug logs
    """
    logger.debug(f"Simulated call '{operation}' ({delay:.2f}s)")
    if delay > 0:
        await asyncio.sleep(delay)
