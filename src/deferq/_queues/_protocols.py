#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import sys

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from typing import Any

    from ._modes import Mode
    from ._types import WorkItem

    if sys.version_info >= (3, 9):  # PEP 585
        from collections.abc import (
            AsyncIterator,
            Awaitable,
            Callable,
            Iterable,
            Iterator,
        )
    else:
        from typing import (
            AsyncIterator,
            Awaitable,
            Callable,
            Iterable,
            Iterator,
        )

    if sys.version_info >= (3, 11):  # PEP 673
        from typing import Self
    else:  # typing-extensions>=4.0.0
        from typing_extensions import Self

if sys.version_info >= (3, 13):  # various fixes and improvements
    from typing import Protocol
else:  # typing-extensions>=4.10.0
    from typing_extensions import Protocol

_T = TypeVar("_T")


class BaseQueue(Protocol):
    """
    A base queue protocol that includes all except item access methods.

    Both the synchronous collection and the work queue keep their entries in
    insertion order and serve reads from one end, selected by
    :class:`~deferq.Mode`.
    """

    __slots__ = ()

    def __bool__(self, /) -> bool:
        """
        Return :data:`True` if the queue is not empty, :data:`False` otherwise.
        """
        ...

    def __len__(self, /) -> int:
        """
        Return the number of entries in the queue.
        """
        ...

    def size(self, /) -> int:
        """
        This method is provided for compatibility with queue-style APIs. Use
        :meth:`len(queue) <__len__>` as a direct substitute.
        """
        ...

    def clear(self, /) -> Self:
        """
        Remove all entries from the queue.

        Returns:
          The queue itself, for chaining.
        """
        ...

    def set_mode(self, /, mode: Mode | str) -> Self:
        """
        Switch the end that reads and removals are served from.

        Takes effect for every subsequent call. Stored entries are never
        reordered.

        Raises:
          ValueError:
            if *mode* is not a valid :class:`~deferq.Mode`.
        """
        ...

    def use_fifo(self, /) -> Self:
        """
        Serve the oldest entry first (:abbr:`FIFO (first-in, first-out)`).
        """
        ...

    def use_filo(self, /) -> Self:
        """
        Serve the newest entry first (:abbr:`FILO (first-in, last-out)`), i.e.
        behave like a stack.
        """
        ...

    @property
    def mode(self, /) -> Mode:
        """
        The current access mode.
        """
        ...


class SyncQueue(BaseQueue, Protocol[_T]):
    """
    A synchronous queue protocol over immediately available items.
    """

    __slots__ = ()

    def __iter__(self, /) -> Iterator[_T]:
        """
        Drain the queue, yielding one polled item per step.

        The iterator is lazy and consumes the queue. Breaking out of the loop
        leaves the remaining items in the queue, but the same iterator cannot
        be resumed afterwards.
        """
        ...

    def add(self, /, item: _T | list[_T]) -> Self:
        """
        Append *item* to the tail of the queue.

        A :class:`list` argument is treated as a sequence of items and
        concatenated in its order. Use :meth:`extend` for other iterables.
        """
        ...

    def extend(self, /, items: Iterable[_T]) -> Self:
        """
        Append every item of *items* to the tail of the queue.
        """
        ...

    def peek(self, /) -> _T | None:
        """
        Return the head item without removing it, or :data:`None` if the
        queue is empty.
        """
        ...

    def element(self, /) -> _T:
        """
        Return the head item without removing it.

        Raises:
          EmptyCollectionError:
            if the queue is empty.
        """
        ...

    def poll(self, /) -> _T | None:
        """
        Remove and return the head item, or :data:`None` if the queue is
        empty.
        """
        ...

    def remove(self, /) -> _T:
        """
        Remove and return the head item.

        Raises:
          EmptyCollectionError:
            if the queue is empty.
        """
        ...

    def to_array(self, /) -> list[_T]:
        """
        Return the live backing list in insertion order.

        No copy is made: mutating the result mutates the queue.
        """
        ...

    def to_string(
        self,
        /,
        formatter: Callable[[_T], str] | None = None,
    ) -> str:
        """
        Render the items in insertion order, joined by ``" <- "`` in FIFO
        mode and by ``" -> "`` in FILO mode.

        Args:
          formatter:
            A function used to render each item. Defaults to :class:`str`.
        """
        ...


class AsyncQueue(BaseQueue, Protocol[_T]):
    """
    An asynchronous queue protocol over deferred computations.

    Each entry is a :class:`~deferq.WorkItem` that produces a value only when
    evaluated. The outcome of evaluating the head (its value or its
    exception) is kept in a single cache slot, so reading the head several
    times evaluates it only once, and removing it afterwards delivers the
    same outcome.
    """

    __slots__ = ()

    def __aiter__(self, /) -> AsyncIterator[_T]:
        """
        Drain the queue, awaiting one :meth:`poll` per step.

        An exception raised by an entry is propagated to the consumer of that
        step, leaving all later entries queued. Breaking out of the loop
        leaves the remaining entries queued and unevaluated.
        """
        ...

    def add(
        self,
        func: Callable[..., _T | Awaitable[_T]],
        /,
        *args: Any,
        **kwargs: Any,
    ) -> Self:
        """
        Append a deferred call of *func* with the given arguments.

        *func* may be a coroutine function or a plain callable. It is not
        called until the entry is read.
        """
        ...

    async def peek(self, /) -> _T | None:
        """
        Return the outcome of the head entry without removing it, or
        :data:`None` if the queue is empty.

        The head is evaluated at most once: later calls (including concurrent
        ones) return the cached value or re-raise the cached exception.

        Raises:
          Exception:
            the exception raised by the head entry, if any.
        """
        ...

    async def element(self, /) -> _T:
        """
        Return the outcome of the head entry without removing it.

        Raises:
          EmptyWorkQueueError:
            if the queue is empty.
          Exception:
            the exception raised by the head entry, if any.
        """
        ...

    async def poll(self, /) -> _T | None:
        """
        Remove the head entry and return its outcome, or :data:`None` if the
        queue is empty.

        If the head was already evaluated by :meth:`peek` or :meth:`element`,
        the cached outcome is delivered and the entry is not evaluated again.
        Otherwise the entry is evaluated now and nothing is cached.

        Raises:
          Exception:
            the exception raised by the head entry, if any.
        """
        ...

    async def remove(self, /) -> _T:
        """
        Remove the head entry and return its outcome.

        Raises:
          EmptyWorkQueueError:
            if the queue is empty.
          Exception:
            the exception raised by the head entry, if any.
        """
        ...

    async def batch(self, /, size: int) -> list[_T]:
        """
        Remove up to *size* entries from the head end and evaluate them
        concurrently.

        The results are returned in the order the entries had in the queue.
        Returns an empty list if the queue is empty or *size* is less than 1.

        Note, a batch never uses the head cache: if the head has already been
        evaluated by :meth:`peek`, it is evaluated again as part of the batch
        and the cached outcome is dropped.

        Raises:
          Exception:
            the first exception raised by any entry of the batch. The entries
            are removed regardless.
        """
        ...

    def to_array(self, /) -> list[WorkItem[_T]]:
        """
        Return a shallow copy of the entries in insertion order.
        """
        ...

