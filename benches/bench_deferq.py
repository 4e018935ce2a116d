#!/usr/bin/env python3

# SPDX-FileCopyrightText: 2025 Ilya Egorov <0x42005e1f@gmail.com>
# SPDX-License-Identifier: 0BSD

import asyncio
import sys

import deferq


async def work(item):
    await asyncio.sleep(0)

    return item


async def func(queue, size):
    ops = 0

    try:
        while True:
            for i in range(size):
                queue.add(work, i)

            if size == 1:
                await queue.peek()
                await queue.poll()
            else:
                await queue.batch(size)

            ops += size
    finally:
        print(f"batch({size}): {ops // 6}")


async def main():
    for size in (1, 10, 100):
        queue = deferq.WorkQueue()

        try:
            await asyncio.wait_for(func(queue, size), 6)
        except asyncio.TimeoutError:
            pass


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
