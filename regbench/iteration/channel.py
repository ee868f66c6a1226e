"""
Bounded, sealable result channel.

ResultChannel hands IterationResults from one or more producer threads to
a consumer. It distinguishes "empty, more coming" from "empty and done":
once sealed, no further sends are accepted and a receiver that finds the
buffer empty gets ChannelClosed instead of blocking.

Usage:
    channel = ResultChannel(capacity=n)
    channel.send(result)      # producer(s)
    channel.close()           # after the last send
    for result in channel:    # consumer; stops when sealed and drained
        ...
"""

from __future__ import annotations

import threading
from collections import deque
from typing import Generic, Iterator, TypeVar

from regbench.core.exceptions import ChannelClosed
from regbench.core.validation import check_count

T = TypeVar('T')


class ResultChannel(Generic[T]):
    """
    Thread-safe FIFO with a fixed capacity and an explicit seal.
    
    send() blocks while the buffer is full; receive() blocks while the
    buffer is empty and the channel is still open. Both accept a timeout.
    """
    
    def __init__(self, capacity: int):
        """
        Args:
            capacity: Maximum number of buffered items, >= 1
            
        Raises:
            ValidationError: If capacity is not an integer >= 1
        """
        self._capacity = check_count(capacity, 1, 'capacity')
        self._items: deque[T] = deque()
        self._closed = False
        self._sent = 0
        self._lock = threading.Lock()
        self._not_empty = threading.Condition(self._lock)
        self._not_full = threading.Condition(self._lock)
    
    @property
    def capacity(self) -> int:
        return self._capacity
    
    @property
    def closed(self) -> bool:
        """True once close() has been called, even if items remain."""
        with self._lock:
            return self._closed
    
    @property
    def sent(self) -> int:
        """Total number of items ever accepted."""
        with self._lock:
            return self._sent
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
    
    def send(self, item: T, timeout: float | None = None) -> None:
        """
        Append an item, waiting for space if the buffer is full.
        
        Raises:
            ChannelClosed: If the channel is sealed, before or during the wait
            TimeoutError: If no space appeared within timeout seconds
        """
        with self._not_full:
            if self._closed:
                raise ChannelClosed("send on a sealed channel")
            if not self._not_full.wait_for(
                lambda: self._closed or len(self._items) < self._capacity,
                timeout=timeout,
            ):
                raise TimeoutError(
                    f"channel full ({self._capacity} items) for {timeout}s"
                )
            if self._closed:
                raise ChannelClosed("send on a sealed channel")
            self._items.append(item)
            self._sent += 1
            self._not_empty.notify()
    
    def receive(self, timeout: float | None = None) -> T:
        """
        Remove and return the oldest item, waiting while open and empty.
        
        Raises:
            ChannelClosed: If the channel is sealed and drained
            TimeoutError: If nothing arrived within timeout seconds
        """
        with self._not_empty:
            if not self._not_empty.wait_for(
                lambda: self._items or self._closed,
                timeout=timeout,
            ):
                raise TimeoutError(f"nothing received within {timeout}s")
            if not self._items:
                raise ChannelClosed("receive on a sealed, drained channel")
            item = self._items.popleft()
            self._not_full.notify()
            return item
    
    def close(self) -> None:
        """
        Seal the channel. Buffered items remain receivable.
        
        Raises:
            ChannelClosed: If already sealed
        """
        with self._lock:
            if self._closed:
                raise ChannelClosed("channel already sealed")
            self._closed = True
            self._not_empty.notify_all()
            self._not_full.notify_all()
    
    def __iter__(self) -> Iterator[T]:
        """Receive until the channel is sealed and drained."""
        while True:
            try:
                yield self.receive()
            except ChannelClosed:
                return
    
    def __repr__(self) -> str:
        with self._lock:
            state = 'sealed' if self._closed else 'open'
            return (
                f"ResultChannel(capacity={self._capacity}, "
                f"buffered={len(self._items)}, {state})"
            )
