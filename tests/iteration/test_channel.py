"""
Tests for ResultChannel.

Validates FIFO delivery, sealing semantics, blocking behavior and use
from several producer threads.
"""

import threading

import pytest

from regbench.core.exceptions import ChannelClosed, ValidationError
from regbench.iteration import ResultChannel


class TestConstruction:

    def test_capacity(self):
        assert ResultChannel(5).capacity == 5

    @pytest.mark.parametrize("capacity", [0, -1])
    def test_capacity_must_be_positive(self, capacity):
        with pytest.raises(ValidationError, match="capacity"):
            ResultChannel(capacity)

    def test_starts_open_and_empty(self):
        channel = ResultChannel(3)
        assert not channel.closed
        assert len(channel) == 0
        assert channel.sent == 0


class TestSendReceive:

    def test_fifo(self):
        channel = ResultChannel(3)
        for item in ("a", "b", "c"):
            channel.send(item)
        assert [channel.receive() for _ in range(3)] == ["a", "b", "c"]

    def test_sent_counts_all_items(self):
        channel = ResultChannel(2)
        channel.send(1)
        channel.receive()
        channel.send(2)
        assert channel.sent == 2
        assert len(channel) == 1

    def test_receive_timeout_when_open_and_empty(self):
        channel = ResultChannel(1)
        with pytest.raises(TimeoutError):
            channel.receive(timeout=0.01)

    def test_send_timeout_when_full(self):
        channel = ResultChannel(1)
        channel.send(1)
        with pytest.raises(TimeoutError):
            channel.send(2, timeout=0.01)

    def test_blocked_send_resumes_after_receive(self):
        channel = ResultChannel(1)
        channel.send(1)
        sender = threading.Thread(target=channel.send, args=(2,))
        sender.start()
        assert channel.receive(timeout=1) == 1
        sender.join(timeout=1)
        assert not sender.is_alive()
        assert channel.receive(timeout=1) == 2

    def test_blocked_receive_resumes_after_send(self):
        channel = ResultChannel(1)
        received = []
        receiver = threading.Thread(target=lambda: received.append(channel.receive()))
        receiver.start()
        channel.send("x")
        receiver.join(timeout=1)
        assert received == ["x"]


class TestSealing:

    def test_items_survive_close(self):
        channel = ResultChannel(2)
        channel.send(1)
        channel.send(2)
        channel.close()
        assert channel.closed
        assert list(channel) == [1, 2]

    def test_receive_after_drain_raises(self):
        channel = ResultChannel(1)
        channel.close()
        with pytest.raises(ChannelClosed):
            channel.receive()

    def test_send_after_close_raises(self):
        channel = ResultChannel(1)
        channel.close()
        with pytest.raises(ChannelClosed, match="sealed"):
            channel.send(1)

    def test_double_close_raises(self):
        channel = ResultChannel(1)
        channel.close()
        with pytest.raises(ChannelClosed, match="already sealed"):
            channel.close()

    def test_empty_sealed_iterates_nothing(self):
        channel = ResultChannel(1)
        channel.close()
        assert list(channel) == []

    def test_close_wakes_blocked_receiver(self):
        channel = ResultChannel(1)
        outcome = []

        def receive():
            try:
                channel.receive()
            except ChannelClosed:
                outcome.append("closed")

        receiver = threading.Thread(target=receive)
        receiver.start()
        channel.close()
        receiver.join(timeout=1)
        assert outcome == ["closed"]

    def test_close_wakes_blocked_sender(self):
        channel = ResultChannel(1)
        channel.send(1)
        outcome = []

        def send():
            try:
                channel.send(2)
            except ChannelClosed:
                outcome.append("closed")

        sender = threading.Thread(target=send)
        sender.start()
        channel.close()
        sender.join(timeout=1)
        assert outcome == ["closed"]
        assert list(channel) == [1]

    def test_repr_shows_state(self):
        channel = ResultChannel(4)
        channel.send(1)
        assert "open" in repr(channel)
        channel.close()
        assert "sealed" in repr(channel)
        assert "buffered=1" in repr(channel)


class TestConcurrentProducers:

    def test_every_item_delivered_once(self):
        n_producers, per_producer = 8, 250
        channel = ResultChannel(n_producers * per_producer)

        def produce(k):
            for j in range(per_producer):
                channel.send((k, j))

        threads = [threading.Thread(target=produce, args=(k,)) for k in range(n_producers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        channel.close()

        items = list(channel)
        assert len(items) == n_producers * per_producer
        assert set(items) == {(k, j) for k in range(n_producers) for j in range(per_producer)}

    def test_consumer_concurrent_with_small_buffer(self):
        channel = ResultChannel(2)
        total = 500

        def produce():
            for i in range(total):
                channel.send(i)
            channel.close()

        producer = threading.Thread(target=produce)
        producer.start()
        items = list(channel)
        producer.join(timeout=5)
        assert items == list(range(total))
