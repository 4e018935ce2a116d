#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: ISC

from ._exceptions import (
    EmptyCollectionError as EmptyCollectionError,
    EmptyWorkQueueError as EmptyWorkQueueError,
    QueueEmpty as QueueEmpty,
)
from ._modes import (
    Mode as Mode,
    access_range as access_range,
)
from ._protocols import (
    AsyncQueue as AsyncQueue,
    BaseQueue as BaseQueue,
    SyncQueue as SyncQueue,
)
from ._types import (
    Queue as Queue,
    WorkItem as WorkItem,
    WorkQueue as WorkQueue,
)
