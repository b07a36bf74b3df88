"""A bump-style kernel memory allocator over a fixed page index."""

from __future__ import annotations

from typing import NamedTuple

from pearlos.errors import (
    KERNEL_PANIC_MEMORY_FULL,
    KERNEL_PANIC_MEMORY_INDEX_FULL,
    KernelPanic,
)

KERNEL_MEMORY_OFFSET_START = 0xFFFFFF
KERNEL_MEMORY_OFFSET_END = 0xFFFFFFFF
MEMORY_INDEX_BASE_SIZE = 10000


class Page(NamedTuple):
    start: int
    end: int


class KernelMemory:
    """Tracks allocated address ranges in an index of start/end pairs.

    The first pair is reserved and marks the beginning of kernel memory.
    A new page starts one address after the end of the preceding page.
    """

    def __init__(
        self,
        start: int = KERNEL_MEMORY_OFFSET_START,
        end: int = KERNEL_MEMORY_OFFSET_END,
        index_size: int = MEMORY_INDEX_BASE_SIZE,
    ) -> None:
        if start <= 0:
            raise ValueError("memory start must be positive")
        if end <= start:
            raise ValueError("memory end must lie above its start")
        if index_size < 2:
            raise ValueError("index must hold at least one pair")
        self._start = start
        self._end = end
        self._slots: list[Page | None] = [Page(start, start)]
        self._slots.extend([None] * (index_size // 2 - 1))

    @property
    def pages(self) -> list[Page]:
        """Allocated pages in index order, without the reserved pair."""
        return [page for page in self._slots[1:] if page is not None]

    def _next_start(self, slot: int) -> int:
        return next(
            (page.start for page in self._slots[slot + 1:] if page is not None),
            self._end,
        )

    def kmalloc(self, size: int) -> int:
        """Allocate ``size`` bytes and return the start address."""
        if size < 0:
            raise ValueError("size must not be negative")
        free = [slot for slot in range(1, len(self._slots)) if self._slots[slot] is None]
        if not free:
            raise KernelPanic(KERNEL_PANIC_MEMORY_INDEX_FULL)
        for slot in free:
            previous = self._slots[slot - 1]
            if previous is None:
                continue
            if self._next_start(slot) - previous.end > size:
                if previous.end + size + 1 >= self._end:
                    raise KernelPanic(KERNEL_PANIC_MEMORY_FULL)
                page = Page(previous.end + 1, previous.end + 1 + size)
                self._slots[slot] = page
                return page.start
        raise KernelPanic(KERNEL_PANIC_MEMORY_FULL)

    def kfree(self, address: int) -> None:
        """Release the page starting at ``address``."""
        for slot in range(1, len(self._slots)):
            page = self._slots[slot]
            if page is not None and page.start == address:
                self._slots[slot] = None
                return
        raise ValueError(f"address {address:#x} is not allocated")

    def usage(self) -> int:
        """Sum of the sizes of all allocated pages."""
        return sum(page.end - page.start for page in self.pages)

    def usage_effective(self) -> int:
        """Span from the start of memory to the highest allocated end."""
        highest = max((page.end for page in self.pages), default=self._start + 1)
        return highest - (self._start + 1)

    def total(self) -> int:
        """Size of the whole kernel memory range."""
        return self._end - self._start