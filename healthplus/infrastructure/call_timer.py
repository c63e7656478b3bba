"""
Teleconsultation call timer.

A cancellable repeating asyncio task that counts call seconds. It is owned by
the teleconsultation lifecycle: started when a session opens and cancelled
when it closes.
"""

import asyncio
import logging

logger = logging.getLogger(__name__)


class CallTimer:
    """
    Counts elapsed ticks while a call is running.

    Example:
        ```python
        timer = CallTimer(tick_seconds=1.0)
        timer.start()
        ...
        duration = await timer.stop()
        ```
    """

    def __init__(self, tick_seconds: float = 1.0):
        self.tick_seconds = tick_seconds
        self.elapsed = 0
        self._task: asyncio.Task | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Reset the counter and start ticking. Must run inside an event loop."""
        if self.is_running:
            logger.warning("Call timer already running, restarting")
            self._task.cancel()  # type: ignore[union-attr]
        self.elapsed = 0
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def stop(self) -> int:
        """Cancel the ticking task and return the elapsed count."""
        task, self._task = self._task, None
        if task is not None:
            task.cancel()
            # A task bound to another (possibly closed) loop cannot be awaited here.
            if task.get_loop() is asyncio.get_running_loop():
                try:
                    await task
                except asyncio.CancelledError:
                    pass
        return self.elapsed

    def reset(self) -> None:
        self.elapsed = 0

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.tick_seconds)
            self.elapsed += 1
