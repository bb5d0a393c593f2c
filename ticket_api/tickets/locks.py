"""Reader/writer lock for coroutines sharing one event loop."""

from __future__ import annotations

import asyncio
from collections import deque
from contextlib import asynccontextmanager
from typing import AsyncIterator


class ReadWriteLock:
    """Shared/exclusive lock with FIFO hand-off.

    Any number of readers may hold the lock at once; a writer holds it alone.
    Waiters are granted in arrival order, so a queued writer keeps later
    readers out until it has run.
    """

    def __init__(self) -> None:
        self._readers = 0
        self._writer = False
        self._waiters: deque[tuple[asyncio.Future[None], bool]] = deque()

    @property
    def readers(self) -> int:
        return self._readers

    @property
    def write_locked(self) -> bool:
        return self._writer

    async def acquire_read(self) -> None:
        if not self._writer and not self._waiters:
            self._readers += 1
            return
        await self._wait(exclusive=False)

    async def acquire_write(self) -> None:
        if not self._writer and self._readers == 0 and not self._waiters:
            self._writer = True
            return
        await self._wait(exclusive=True)

    def release_read(self) -> None:
        if self._readers <= 0:
            raise RuntimeError("Read lock released more times than acquired")
        self._readers -= 1
        self._wake_waiters()

    def release_write(self) -> None:
        if not self._writer:
            raise RuntimeError("Write lock released while not held")
        self._writer = False
        self._wake_waiters()

    @asynccontextmanager
    async def read(self) -> AsyncIterator[None]:
        await self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @asynccontextmanager
    async def write(self) -> AsyncIterator[None]:
        await self.acquire_write()
        try:
            yield
        finally:
            self.release_write()

    async def _wait(self, *, exclusive: bool) -> None:
        future: asyncio.Future[None] = asyncio.get_running_loop().create_future()
        entry = (future, exclusive)
        self._waiters.append(entry)
        try:
            await future
        except asyncio.CancelledError:
            if future.done() and not future.cancelled():
                # Granted just before the cancellation landed.
                if exclusive:
                    self.release_write()
                else:
                    self.release_read()
            else:
                if entry in self._waiters:
                    self._waiters.remove(entry)
                self._wake_waiters()
            raise

    def _wake_waiters(self) -> None:
        while self._waiters and not self._writer:
            future, exclusive = self._waiters[0]
            if future.done():
                self._waiters.popleft()
                continue
            if exclusive:
                if self._readers:
                    return
                self._waiters.popleft()
                self._writer = True
                future.set_result(None)
                return
            self._waiters.popleft()
            self._readers += 1
            future.set_result(None)
