#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

"""
Lazy FIFO/FILO work queues for asyncio

A double-ended queue of deferred calls: each entry is a function with its
arguments, evaluated only when read. The outcome of the head entry is cached,
so peeking and then polling evaluates it once. Entries can also be evaluated
concurrently in batches, or drained with ``async for``.

A plain synchronous :class:`Queue` with the same FIFO/FILO semantics is
included as well.
"""

from __future__ import annotations

__author__: str = "Ilya Egorov <0x42005e1f@gmail.com>"
__version__: str = "0.1.0"
__version_tuple__: tuple[int | str, ...] = (0, 1, 0)

from ._queues import (
    AsyncQueue as AsyncQueue,
    BaseQueue as BaseQueue,
    EmptyCollectionError as EmptyCollectionError,
    EmptyWorkQueueError as EmptyWorkQueueError,
    Mode as Mode,
    Queue as Queue,
    QueueEmpty as QueueEmpty,
    SyncQueue as SyncQueue,
    WorkItem as WorkItem,
    WorkQueue as WorkQueue,
    access_range as access_range,
)
