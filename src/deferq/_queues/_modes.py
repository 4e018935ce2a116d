#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from __future__ import annotations

from enum import Enum


class Mode(str, Enum):
    """
    The end of a queue that reads and removals are served from.
    """

    #: first-in, first-out: the oldest item is the head
    FIFO = "fifo"
    #: first-in, last-out: the newest item is the head (a stack)
    FILO = "filo"


def access_range(mode: Mode, length: int, count: int = 1) -> tuple[int, int]:
    """
    Return the ``(start, stop)`` slice of a backing list of *length* items
    that holds the next *count* items to be read under *mode*.

    The head index is ``access_range(mode, length)[0]``. The slice is empty
    when *length* or *count* is not positive.
    """

    if length <= 0 or count <= 0:
        return (0, 0)

    if mode is Mode.FIFO:
        return (0, min(count, length))

    return (max(0, length - count), length)
