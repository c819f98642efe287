"""
Streaming Abstract Base Class

Defines the listen contract shared by every streaming backend, so callers can swap
one backend for another without touching their event handling.
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Union

from stream_shared.protocol.events import Event

EventSink = Callable[[Event], Union[Awaitable[None], None]]


class Streaming(ABC):
    """Abstract base class for streaming backends."""

    @abstractmethod
    async def listen(self, sink: EventSink) -> None:
        """
        Deliver every decoded event to `sink`, in arrival order, until the server
        closes the stream normally.

        Args:
            sink: Callable taking one Event. May be a coroutine function; it is
                awaited before the next frame is read.
        """
        pass


async def deliver(sink: EventSink, event: Event) -> None:
    """Call `sink` and await the result when it is awaitable."""
    result = sink(event)
    if inspect.isawaitable(result):
        await result


__all__ = ["EventSink", "Streaming", "deliver"]
