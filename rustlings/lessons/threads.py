"""Spawning threads, sharing state between them and passing messages."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from queue import SimpleQueue

_DONE = object()


def spawn_and_join(count: int = 10, delay: float = 0.25) -> int:
    """Start count threads that each sleep and report; wait for all and return how many finished."""

    def job(number: int) -> None:
        time.sleep(delay)
        print(f"thread {number} is complete")

    threads = [threading.Thread(target=job, args=(number,)) for number in range(count)]
    for thread in threads:
        thread.start()
    completed = 0
    for thread in threads:
        thread.join()
        completed += 1
    if completed != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    return completed


@dataclass
class JobStatus:
    """How many jobs have completed."""

    jobs_completed: int = 0


def run_jobs(count: int = 10, delay: float = 0.25) -> JobStatus:
    """Run count threads that each increment a shared counter under a lock."""
    status = JobStatus()
    lock = threading.Lock()

    def job() -> None:
        time.sleep(delay)
        with lock:
            status.jobs_completed += 1

    threads = [threading.Thread(target=job) for _ in range(count)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    print(f"jobs completed {status.jobs_completed}")
    return status


@dataclass
class Queue:
    """Values to send, split into two halves, and how many are expected."""

    length: int = 10
    first_half: list[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    second_half: list[int] = field(default_factory=lambda: [6, 7, 8, 9, 10])


def send_tx(queue: Queue, tx: SimpleQueue, delay: float = 1.0) -> list[threading.Thread]:
    """Send each half of the queue from its own thread; each thread ends with a done marker."""

    def sender(values: list[int]) -> None:
        try:
            for value in values:
                print(f"sending {value}")
                tx.put(value)
                time.sleep(delay)
        finally:
            tx.put(_DONE)

    threads = [
        threading.Thread(target=sender, args=(half,))
        for half in (queue.first_half, queue.second_half)
    ]
    for thread in threads:
        thread.start()
    return threads


def receive_all(queue: Queue, delay: float = 1.0) -> list[int]:
    """Receive everything sent for the queue; raise RuntimeError if the count differs from its length."""
    rx: SimpleQueue = SimpleQueue()
    senders = send_tx(queue, rx, delay)
    received: list[int] = []
    finished = 0
    while finished < len(senders):
        value = rx.get()
        if value is _DONE:
            finished += 1
            continue
        print(f"Got: {value}")
        received.append(value)
    for thread in senders:
        thread.join()
    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} numbers, expected {queue.length}"
        )
    return received