#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

import asyncio
import queue

SyncQueueEmpty = queue.Empty
AsyncQueueEmpty = asyncio.QueueEmpty


class QueueEmpty(SyncQueueEmpty, AsyncQueueEmpty):
    """
    Raised when element/remove with empty queue.
    """

    default_message = "The queue is empty."

    def __init__(self, /, *args: object) -> None:
        if not args:
            args = (self.default_message,)

        super().__init__(*args)


class EmptyCollectionError(QueueEmpty):
    """
    Raised when element/remove with empty :class:`~deferq.Queue`.
    """


class EmptyWorkQueueError(QueueEmpty):
    """
    Raised when element/remove with empty :class:`~deferq.WorkQueue`.
    """

    default_message = "The work queue is empty."
