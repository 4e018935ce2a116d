#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

import asyncio
import logging
import sys

from abc import ABC, abstractmethod
from inspect import isawaitable
from typing import TYPE_CHECKING, Generic, TypeVar

from aiologic import Lock
from aiologic.meta import MISSING

from ._exceptions import EmptyCollectionError, EmptyWorkQueueError
from ._modes import Mode, access_range
from ._protocols import AsyncQueue, BaseQueue, SyncQueue

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Any, NoReturn

    from aiologic.meta import MissingType

    if sys.version_info >= (3, 9):  # PEP 585
        from collections.abc import Awaitable, Callable, Iterable, Iterator
    else:
        from typing import Awaitable, Callable, Iterable, Iterator

    if sys.version_info >= (3, 11):  # PEP 673
        from typing import Self
    else:  # typing-extensions>=4.0.0
        from typing_extensions import Self

if sys.version_info >= (3, 12):  # PEP 698
    from typing import override
else:  # typing-extensions>=4.5.0
    from typing_extensions import override

_T = TypeVar("_T")

logger = logging.getLogger(__name__)


class WorkItem(Generic[_T]):
    """
    A deferred call: a function together with the arguments to call it with.

    The function is only referenced, not called, until :meth:`evaluate`.
    """

    __slots__ = (
        "__weakref__",
        "args",
        "func",
        "kwargs",
    )

    func: Callable[..., _T | Awaitable[_T]]
    args: tuple[Any, ...]
    kwargs: dict[str, Any]

    def __init__(
        self,
        func: Callable[..., _T | Awaitable[_T]],
        /,
        *args: Any,
        **kwargs: Any,
    ) -> None:
        self.func = func
        self.args = args
        self.kwargs = kwargs

    def __repr__(self, /) -> str:
        cls = self.__class__
        cls_repr = f"{cls.__module__}.{cls.__qualname__}"

        params = [repr(self.func)]
        params.extend(map(repr, self.args))
        params.extend(f"{key}={value!r}" for key, value in self.kwargs.items())

        return f"{cls_repr}({', '.join(params)})"

    async def evaluate(self, /) -> _T:
        """
        Call the function with the bound arguments and return its result.

        If the function returns an awaitable (e.g. it is a coroutine
        function), the awaitable is awaited first.
        """

        result = self.func(*self.args, **self.kwargs)

        if isawaitable(result):
            result = await result

        return result


class _Outcome(ABC, Generic[_T]):
    __slots__ = ("item",)

    item: WorkItem[_T]

    @abstractmethod
    def unwrap(self, /) -> _T: ...


class _Success(_Outcome[_T]):
    __slots__ = ("value",)

    value: _T

    def __init__(self, /, item: WorkItem[_T], value: _T) -> None:
        self.item = item
        self.value = value

    @override
    def unwrap(self, /) -> _T:
        return self.value


class _Failure(_Outcome[_T]):
    __slots__ = (
        "exception",
        "traceback",
    )

    exception: Exception
    traceback: TracebackType | None

    def __init__(self, /, item: WorkItem[_T], exception: Exception) -> None:
        self.item = item
        self.exception = exception
        self.traceback = exception.__traceback__

    @override
    def unwrap(self, /) -> NoReturn:
        # the same object every time, without tracebacks piling up
        raise self.exception.with_traceback(self.traceback)


async def _evaluate(item: WorkItem[_T]) -> _Outcome[_T]:
    logger.debug("Evaluating %r", item)

    try:
        value = await item.evaluate()
    except Exception as exc:
        logger.debug("%r raised %r", item, exc)

        return _Failure(item, exc)

    return _Success(item, value)


class _OrderedQueue(BaseQueue):
    __slots__ = (
        "__weakref__",
        "_data",
        "_mode",
    )

    _data: list[Any]
    _mode: Mode

    def __init__(self, /, *, mode: Mode | str = Mode.FIFO) -> None:
        self._data = []
        self._mode = Mode(mode)

    def __bool__(self, /) -> bool:
        return bool(self._data)

    def __len__(self, /) -> int:
        return len(self._data)

    def size(self, /) -> int:
        return len(self._data)

    def clear(self, /) -> Self:
        self._data.clear()

        return self

    def set_mode(self, /, mode: Mode | str) -> Self:
        self._mode = Mode(mode)

        return self

    def use_fifo(self, /) -> Self:
        return self.set_mode(Mode.FIFO)

    def use_filo(self, /) -> Self:
        return self.set_mode(Mode.FILO)

    def _head_index(self, /) -> int:
        return access_range(self._mode, len(self._data))[0]

    def _repr_params(self, /) -> str:
        return f"{self._data!r}, mode={self._mode.value!r}"

    def __repr__(self, /) -> str:
        cls = self.__class__
        cls_repr = f"{cls.__module__}.{cls.__qualname__}"

        return f"{cls_repr}({self._repr_params()})"

    @property
    def mode(self, /) -> Mode:
        return self._mode


class Queue(_OrderedQueue, SyncQueue[_T]):
    """
    A double-ended collection of immediately available items that is:

    * :abbr:`FIFO (first-in, first-out)` by default
    * :abbr:`FILO (first-in, last-out)` on demand (see :meth:`set_mode`)

    Items are always stored in insertion order. The mode only selects the end
    that :meth:`peek` and :meth:`poll` are served from.
    """

    __slots__ = ()

    _data: list[_T]

    def __init__(
        self,
        /,
        initial: Iterable[_T] = (),
        *,
        mode: Mode | str = Mode.FIFO,
    ) -> None:
        """
        Create a queue object, optionally seeded with the *initial* items.
        """

        super().__init__(mode=mode)

        self._data.extend(initial)

    def __str__(self, /) -> str:
        return self.to_string()

    def __iter__(self, /) -> Iterator[_T]:
        while self._data:
            yield self._get()

    def add(self, /, item: _T | list[_T]) -> Self:
        if isinstance(item, list):
            self._data.extend(item)
        else:
            self._data.append(item)

        return self

    def extend(self, /, items: Iterable[_T]) -> Self:
        self._data.extend(items)

        return self

    def peek(self, /) -> _T | None:
        if not self._data:
            return None

        return self._peek()

    def element(self, /) -> _T:
        if not self._data:
            raise EmptyCollectionError

        return self._peek()

    def poll(self, /) -> _T | None:
        if not self._data:
            return None

        return self._get()

    def remove(self, /) -> _T:
        if not self._data:
            raise EmptyCollectionError

        return self._get()

    def to_array(self, /) -> list[_T]:
        return self._data

    def to_string(
        self,
        /,
        formatter: Callable[[_T], str] | None = None,
    ) -> str:
        if formatter is None:
            formatter = str

        if self._mode is Mode.FIFO:
            separator = " <- "
        else:
            separator = " -> "

        return separator.join(map(formatter, self._data))

    def _peek(self, /) -> _T:
        return self._data[self._head_index()]

    def _get(self, /) -> _T:
        return self._data.pop(self._head_index())


class WorkQueue(_OrderedQueue, AsyncQueue[_T]):
    """
    A double-ended queue of deferred computations that is:

    * :abbr:`FIFO (first-in, first-out)` by default
    * :abbr:`FILO (first-in, last-out)` on demand (see :meth:`set_mode`)
    * lazy: entries are evaluated only when read

    The outcome of the head entry is cached in a single slot until the entry
    is removed, so :meth:`peek` followed by :meth:`poll` evaluates the entry
    once.
    """

    __slots__ = (
        "_cache",
        "mutex",
    )

    _data: list[WorkItem[_T]]

    _cache: _Outcome[_T] | MissingType

    mutex: Lock

    def __init__(self, /, *, mode: Mode | str = Mode.FIFO) -> None:
        super().__init__(mode=mode)

        self._cache = MISSING

        self.mutex = Lock()

    def __aiter__(self, /) -> _WorkQueueIterator[_T]:
        return _WorkQueueIterator(self)

    def add(
        self,
        func: Callable[..., _T | Awaitable[_T]],
        /,
        *args: Any,
        **kwargs: Any,
    ) -> Self:
        self._data.append(WorkItem(func, *args, **kwargs))

        return self

    async def peek(self, /) -> _T | None:
        outcome = await self._peek_outcome()

        if outcome is MISSING:
            return None

        return outcome.unwrap()

    async def element(self, /) -> _T:
        outcome = await self._peek_outcome()

        if outcome is MISSING:
            raise EmptyWorkQueueError

        return outcome.unwrap()

    async def poll(self, /) -> _T | None:
        outcome = await self._poll_outcome()

        if outcome is MISSING:
            return None

        return outcome.unwrap()

    async def remove(self, /) -> _T:
        outcome = await self._poll_outcome()

        if outcome is MISSING:
            raise EmptyWorkQueueError

        return outcome.unwrap()

    async def batch(self, /, size: int) -> list[_T]:
        async with self.mutex:
            start, stop = access_range(self._mode, len(self._data), size)

            if start >= stop:
                return []

            items = self._data[start:stop]

            del self._data[start:stop]

            cache = self._cache

            # a batch re-evaluates its items, even the cached head
            if cache is not MISSING and any(i is cache.item for i in items):
                logger.debug("Dropping the cached outcome of %r", cache.item)

                self._cache = MISSING

            logger.debug("Evaluating a batch of %d items", len(items))

            return list(await asyncio.gather(*[i.evaluate() for i in items]))

    @override
    def clear(self, /) -> Self:
        self._data.clear()
        self._cache = MISSING

        return self

    def to_array(self, /) -> list[WorkItem[_T]]:
        return self._data.copy()

    def _cached(self, /, item: WorkItem[_T]) -> _Outcome[_T] | MissingType:
        cache = self._cache

        if cache is not MISSING and cache.item is item:
            return cache

        return MISSING

    async def _peek_outcome(self, /) -> _Outcome[_T] | MissingType:
        async with self.mutex:
            if not self._data:
                return MISSING

            item = self._data[self._head_index()]
            outcome = self._cached(item)

            if outcome is not MISSING:
                logger.debug("Using the cached outcome of %r", item)

                return outcome

            outcome = await _evaluate(item)

            # add/clear/set_mode may have moved the head in the meantime
            if self._data and self._data[self._head_index()] is item:
                self._cache = outcome

            return outcome

    async def _poll_outcome(self, /) -> _Outcome[_T] | MissingType:
        async with self.mutex:
            if not self._data:
                return MISSING

            item = self._data.pop(self._head_index())
            outcome = self._cached(item)

            if outcome is not MISSING:
                self._cache = MISSING

                return outcome

            return await _evaluate(item)


class _WorkQueueIterator(Generic[_T]):
    __slots__ = ("_queue",)

    _queue: WorkQueue[_T] | None

    def __init__(self, /, queue: WorkQueue[_T]) -> None:
        self._queue = queue

    def __aiter__(self, /) -> Self:
        return self

    async def __anext__(self, /) -> _T:
        if self._queue is None:
            raise StopAsyncIteration

        outcome = await self._queue._poll_outcome()

        if outcome is MISSING:
            self._queue = None

            raise StopAsyncIteration

        return outcome.unwrap()
