"""
Consultation Room

Ephemeral state of the live teleconsultation that never enters the snapshot:
the chat transcript, pending canned doctor replies and the call timer.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime

from healthplus.domain.value_objects import ChatSender
from healthplus.infrastructure.call_timer import CallTimer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChatMessage:
    id: str
    sender: ChatSender
    text: str
    time: datetime


class ConsultationRoom:
    """
    Owns the call timer and transcript for the single active session.

    :meth:`open` resets everything and starts the timer; :meth:`close` stops
    the timer, cancels pending replies and clears the transcript.
    """

    def __init__(self, timer: CallTimer):
        self.timer = timer
        self.messages: list[ChatMessage] = []
        self._reply_tasks: set[asyncio.Task] = set()

    @property
    def elapsed(self) -> int:
        return self.timer.elapsed

    def open(self, welcome: ChatMessage) -> None:
        self._cancel_replies()
        self.messages = [welcome]
        self.timer.start()

    async def close(self) -> int:
        """Stop the call and return its duration in timer ticks."""
        duration = await self.timer.stop()
        self._cancel_replies()
        self.messages = []
        self.timer.reset()
        return duration

    def post(self, message: ChatMessage) -> None:
        self.messages.append(message)

    def schedule_reply(self, delay: float, build_reply: Callable[[], ChatMessage]) -> None:
        """Post ``build_reply()`` after ``delay`` seconds unless the room closes first."""

        async def reply() -> None:
            await asyncio.sleep(delay)
            self.post(build_reply())

        self._track(reply())

    def _track(self, coro: Awaitable[None]) -> None:
        task = asyncio.ensure_future(coro)
        self._reply_tasks.add(task)
        task.add_done_callback(self._reply_tasks.discard)

    def _cancel_replies(self) -> None:
        for task in list(self._reply_tasks):
            task.cancel()
        self._reply_tasks.clear()
