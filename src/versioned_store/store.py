"""Store — a cached, lock-guarded holder for one persisted value."""

from __future__ import annotations

import asyncio
import copy
import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Generic, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)

Encoder = Callable[[T | None], None]
Decoder = Callable[[], T | None]
Updater = Callable[[T | None], "T | None | Awaitable[T | None]"]


class Store(Generic[T]):
    """Owns get/set/update semantics for a single value.

    Byte-level work is delegated to the injected *encoder* and *decoder*,
    which are blocking and run in a worker thread.  One ``asyncio.Lock``
    serializes every operation, so the encoder and decoder never run
    concurrently for the same store.

    Parameters:
        default:      Returned by :meth:`get` when nothing is stored.
        enable_cache: Keep the last read or written value in memory.  When
                      ``False`` every :meth:`get` calls the decoder.
        encoder:      ``(value | None) -> None``; ``None`` clears storage.
        decoder:      ``() -> value | None``; ``None`` means nothing stored.
    """

    def __init__(
        self,
        *,
        default: T | None = None,
        enable_cache: bool = True,
        encoder: Encoder[T],
        decoder: Decoder[T],
    ) -> None:
        self.default = default
        self.enable_cache = enable_cache
        self._encoder = encoder
        self._decoder = decoder
        self._lock = asyncio.Lock()
        self._cache: T | None = None
        self._cached = False
        self._subscribers: set[asyncio.Queue[T | None]] = set()

    # ── reads ────────────────────────────────────────────────

    async def get(self) -> T | None:
        """Return the stored value, or ``default`` if there is none."""
        async with self._lock:
            return await self._read()

    async def updates(self) -> AsyncIterator[T | None]:
        """Yield the current value, then every value written afterwards."""
        queue: asyncio.Queue[T | None] = asyncio.Queue()
        async with self._lock:
            current = await self._read()
            self._subscribers.add(queue)
        try:
            yield current
            while True:
                yield await queue.get()
        finally:
            self._subscribers.discard(queue)

    # ── writes ───────────────────────────────────────────────

    async def set(self, value: T | None) -> None:
        """Persist *value*.  ``None`` clears the stored value."""
        async with self._lock:
            await self._write(value)

    async def update(self, fn: Updater[T]) -> T | None:
        """Apply *fn* to the current value and persist the result.

        *fn* may be a plain function or a coroutine function.  Returns the
        value as a following :meth:`get` would see it.
        """
        async with self._lock:
            current = await self._read()
            result = fn(current)
            if inspect.isawaitable(result):
                result = await result
            return await self._write(result)

    async def delete(self) -> None:
        """Remove the stored value.  Later reads return ``default``."""
        async with self._lock:
            await self._write(None)

    async def reset(self) -> None:
        """Persist ``default`` in place of the current value."""
        async with self._lock:
            await self._write(self._fresh_default())

    async def invalidate(self) -> None:
        """Forget the cached value so the next read goes to storage."""
        async with self._lock:
            self._cache = None
            self._cached = False

    # ── internals (caller holds the lock) ────────────────────

    async def _read(self) -> T | None:
        if self.enable_cache and self._cached:
            return self._cache

        value = await asyncio.to_thread(self._decoder)
        if value is None:
            value = self._fresh_default()
        if self.enable_cache:
            self._cache = value
            self._cached = True
        return value

    def _fresh_default(self) -> T | None:
        # Every substitution hands out its own copy of the default.
        return copy.deepcopy(self.default)

    async def _write(self, value: T | None) -> T | None:
        await asyncio.to_thread(self._encoder, value)
        current = self._fresh_default() if value is None else value
        if self.enable_cache:
            self._cache = current
            self._cached = True
        logger.debug("Store updated (%d subscribers)", len(self._subscribers))
        for queue in self._subscribers:
            queue.put_nowait(current)
        return current
