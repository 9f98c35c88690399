"""Threads, queues used as channels, waiting for workers and locking.

A queue plays the part of a channel; putting None on it closes it.
"""

from __future__ import annotations

import queue
import threading
import time


class Counter:
    """A counter that is safe to increment from several threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = 0

    def increment(self) -> None:
        with self._lock:
            self._value += 1

    def value(self) -> int:
        with self._lock:
            return self._value


def generate_numbers(channel: queue.Queue, delay: float = 0.1) -> None:
    """Send 1 to 5 into the channel, pausing between them, then close it."""
    for number in range(1, 6):
        channel.put(number)
        time.sleep(delay)
    channel.put(None)


def squares(source: queue.Queue, sink: queue.Queue) -> None:
    """Send the square of every number from source into sink, then close sink."""
    for number in iter(source.get, None):
        sink.put(number * number)
    sink.put(None)


def worker(worker_id: int, delay: float = 1.0) -> None:
    """Announce the start, pretend to work, then announce completion."""
    print(f"Worker {worker_id} starting", flush=True)
    time.sleep(delay)
    print(f"Worker {worker_id} done", flush=True)


def _print_numbers() -> None:
    for number in range(1, 6):
        time.sleep(0.1)
        print(f"{number} ", end="", flush=True)


def _print_letters() -> None:
    for letter in "abcde":
        time.sleep(0.15)
        print(f"{letter} ", end="", flush=True)


def _run_all(threads: list[threading.Thread]) -> None:
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def _send_later(channel: queue.Queue, delay: float, message: str) -> None:
    time.sleep(delay)
    channel.put(message)


def main(argv: list[str] | None = None) -> int:
    """Run the concurrency walkthrough."""
    print("1. Basic Goroutines:")
    _run_all([threading.Thread(target=_print_numbers), threading.Thread(target=_print_letters)])

    print("\n\n2. Channels:")
    numbers: queue.Queue = queue.Queue()
    squared: queue.Queue = queue.Queue()
    producers = [
        threading.Thread(target=generate_numbers, args=(numbers,)),
        threading.Thread(target=squares, args=(numbers, squared)),
    ]
    for thread in producers:
        thread.start()
    print("Squares of numbers:")
    for square in iter(squared.get, None):
        print(f"{square} ", end="", flush=True)
    for thread in producers:
        thread.join()

    print("\n\n3. WaitGroup:")
    _run_all([threading.Thread(target=worker, args=(i,)) for i in range(1, 4)])

    print("\n4. Mutex:")
    counter = Counter()

    def bump() -> None:
        for _ in range(1000):
            counter.increment()

    _run_all([threading.Thread(target=bump) for _ in range(5)])
    print(f"Final counter value: {counter.value()}")

    print("\n5. Select Statement:")
    # Both senders share one queue, so messages are taken in arrival order.
    messages: queue.Queue = queue.Queue()
    senders = [
        threading.Thread(target=_send_later, args=(messages, 2.0, "Message from channel 1")),
        threading.Thread(target=_send_later, args=(messages, 1.0, "Message from channel 2")),
    ]
    for thread in senders:
        thread.start()
    for _ in senders:
        print(messages.get())
    for thread in senders:
        thread.join()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())