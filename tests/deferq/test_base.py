#!/usr/bin/env python3

import pytest
import deferq


class _TestQueueBase:
    def test_init(self):
        assert self.factory().mode is deferq.Mode.FIFO
        assert self.factory(mode=deferq.Mode.FILO).mode is deferq.Mode.FILO
        assert self.factory(mode="filo").mode is deferq.Mode.FILO

        with pytest.raises(ValueError):
            self.factory(mode="lifo")

    def test_empty(self):
        queue = self.factory()

        assert not queue
        assert len(queue) == 0
        assert queue.size() == 0
        assert queue.to_array() == []

    def test_set_mode(self):
        queue = self.factory()

        assert queue.set_mode(deferq.Mode.FILO) is queue
        assert queue.mode is deferq.Mode.FILO

        assert queue.set_mode("fifo") is queue
        assert queue.mode is deferq.Mode.FIFO

        assert queue.use_filo() is queue
        assert queue.mode is deferq.Mode.FILO

        assert queue.use_fifo() is queue
        assert queue.mode is deferq.Mode.FIFO

        with pytest.raises(ValueError):
            queue.set_mode("random")

        assert queue.mode is deferq.Mode.FIFO

    def test_getters(self):
        queue = self.factory()

        with pytest.raises(AttributeError):
            queue.nonexistent_attribute

    def test_setters(self):
        queue = self.factory()

        with pytest.raises(AttributeError):
            queue.mode = deferq.Mode.FILO

        with pytest.raises(AttributeError):
            queue.nonexistent_attribute = 42

    def test_repr(self):
        queue = self.factory()
        cls = queue.__class__

        assert repr(queue).startswith(f"{cls.__module__}.{cls.__qualname__}(")
        assert repr(queue).endswith("mode='fifo')")

        queue.use_filo()

        assert repr(queue).endswith("mode='filo')")


class TestQueue(_TestQueueBase):
    factory = deferq.Queue


class TestWorkQueue(_TestQueueBase):
    factory = deferq.WorkQueue
