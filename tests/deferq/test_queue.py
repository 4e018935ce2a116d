#!/usr/bin/env python3

import pytest
import deferq


class TestQueue:
    factory = deferq.Queue

    def test_init(self):
        initial = [1, 2, 3]
        queue = self.factory(initial)

        assert queue.to_array() == [1, 2, 3]
        assert queue.to_array() is not initial

        assert self.factory(range(3)).to_array() == [0, 1, 2]

    def test_add(self):
        queue = self.factory()

        assert queue.add(1) is queue
        assert queue.add([2, 3]) is queue
        assert queue.add((4, 5)) is queue
        assert queue.extend(iter([6, 7])) is queue

        assert queue.to_array() == [1, 2, 3, (4, 5), 6, 7]
        assert len(queue) == 6

    def test_fifo(self):
        queue = self.factory()

        for i in range(5):
            queue.add(i)

        assert [queue.poll() for _ in range(5)] == [0, 1, 2, 3, 4]
        assert queue.poll() is None

    def test_filo(self):
        queue = self.factory(mode=deferq.Mode.FILO)

        for i in range(5):
            queue.add(i)

        assert [queue.poll() for _ in range(5)] == [4, 3, 2, 1, 0]
        assert queue.poll() is None

    def test_mode_switch_keeps_order(self):
        queue = self.factory([1, 2, 3])

        queue.use_filo()

        assert queue.to_array() == [1, 2, 3]
        assert queue.peek() == 3

        queue.use_fifo()

        assert queue.to_array() == [1, 2, 3]
        assert queue.peek() == 1

    def test_size(self):
        queue = self.factory([1, 2])

        queue.add(3)
        assert queue.size() == 3

        queue.poll()
        assert queue.size() == 2

        queue.poll()
        queue.poll()
        queue.poll()
        assert queue.size() == 0

    def test_empty(self):
        queue = self.factory()

        assert queue.peek() is None
        assert queue.poll() is None

        with pytest.raises(deferq.EmptyCollectionError):
            queue.element()
        with pytest.raises(deferq.EmptyCollectionError):
            queue.remove()

    def test_none_items(self):
        queue = self.factory([None])

        assert queue.element() is None
        assert queue.remove() is None

        with pytest.raises(deferq.EmptyCollectionError):
            queue.remove()

    def test_mode_switching_scenario(self):
        queue = self.factory([1, 2, 3, 4, 5])

        assert queue.peek() == 1

        queue.use_filo()

        assert queue.peek() == 5
        assert queue.remove() == 5
        assert queue.remove() == 4

        queue.use_fifo()

        assert queue.element() == 1
        assert queue.remove() == 1
        assert queue.remove() == 2
        assert queue.size() == 1
        assert str(queue) == "3"

    def test_clear(self):
        queue = self.factory([1, 2, 3])
        array = queue.to_array()

        assert queue.clear() is queue
        assert len(queue) == 0
        assert array == []

    def test_to_array_is_live(self):
        queue = self.factory([1, 2])

        queue.to_array().append(3)

        assert len(queue) == 3
        assert queue.to_array() is queue.to_array()

    def test_to_string(self):
        queue = self.factory([1, 2, 3])

        assert str(queue) == "1 <- 2 <- 3"
        assert queue.to_string("<{}>".format) == "<1> <- <2> <- <3>"

        queue.use_filo()

        assert str(queue) == "1 -> 2 -> 3"
        assert str(self.factory()) == ""

    def test_repr(self):
        queue = self.factory([1, 2])

        assert repr(queue) == (
            "deferq._queues._types.Queue([1, 2], mode='fifo')"
        )

    def test_iter(self):
        queue = self.factory([1, 2, 3])

        assert list(queue) == [1, 2, 3]
        assert len(queue) == 0
        assert list(queue) == []

    def test_iter_filo(self):
        queue = self.factory([1, 2, 3], mode="filo")

        assert list(queue) == [3, 2, 1]

    def test_iter_is_lazy(self):
        queue = self.factory([1, 2, 3])
        iterator = iter(queue)

        assert len(queue) == 3
        assert next(iterator) == 1
        assert len(queue) == 2

    def test_iter_break(self):
        queue = self.factory(range(10))
        results = []

        for item in queue:
            results.append(item)

            if item == 6:
                break

        assert results == [0, 1, 2, 3, 4, 5, 6]
        assert queue.to_array() == [7, 8, 9]
