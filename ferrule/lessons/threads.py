"""Threads: joining workers, sharing state under a lock and passing messages."""

from __future__ import annotations

import queue as _queue
import threading
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field


def run_workers(count: int = 10, delay: float = 0.25) -> int:
    """Start `count` threads, wait for all of them and return how many finished."""

    def work(index: int) -> None:
        time.sleep(delay)
        print(f"thread {index} is complete")

    handles = [threading.Thread(target=work, args=(i,)) for i in range(count)]
    for handle in handles:
        handle.start()
    completed = 0
    for handle in handles:
        handle.join()
        completed += 1
    if completed != count:
        raise RuntimeError("Oh no! All the spawned threads did not finish!")
    return completed


@dataclass
class JobStatus:
    """How many jobs have been completed."""

    jobs_completed: int = 0


def run_jobs(count: int = 10, delay: float = 0.25) -> JobStatus:
    """Let `count` threads each record one completed job in a shared status."""
    status = JobStatus()
    lock = threading.Lock()

    def work() -> None:
        time.sleep(delay)
        with lock:
            status.jobs_completed += 1

    handles = [threading.Thread(target=work) for _ in range(count)]
    for handle in handles:
        handle.start()
    for handle in handles:
        handle.join()
        with lock:
            print(f"jobs completed {status.jobs_completed}")
    return status


@dataclass(frozen=True)
class Queue:
    """Ten numbers split into two halves sent by separate threads."""

    length: int = 10
    first_half: tuple[int, ...] = field(default=(1, 2, 3, 4, 5))
    second_half: tuple[int, ...] = field(default=(6, 7, 8, 9, 10))


def send_tx(
    queue: Queue, channel: _queue.Queue, delay: float = 1.0
) -> list[threading.Thread]:
    """Send both halves of the queue on the channel from two threads; return them."""

    def send(values: Iterable[int]) -> None:
        for value in values:
            print(f"sending {value}")
            channel.put(value)
            time.sleep(delay)

    threads = [
        threading.Thread(target=send, args=(queue.first_half,)),
        threading.Thread(target=send, args=(queue.second_half,)),
    ]
    for thread in threads:
        thread.start()
    return threads


def receive_all(queue: Queue | None = None, delay: float = 1.0) -> list[int]:
    """Receive every value sent from the queue until the senders are done."""
    queue = queue or Queue()
    channel: _queue.Queue = _queue.Queue()
    senders = send_tx(queue, channel, delay)
    received: list[int] = []
    while True:
        try:
            value = channel.get(timeout=0.05)
        except _queue.Empty:
            if not any(sender.is_alive() for sender in senders) and channel.empty():
                break
            continue
        print(f"Got: {value}")
        received.append(value)
    for sender in senders:
        sender.join()
    print(f"total numbers received: {len(received)}")
    if len(received) != queue.length:
        raise RuntimeError(
            f"received {len(received)} numbers but the queue holds {queue.length}"
        )
    return received


def offset_sums(numbers: Iterable[int] = range(100), workers: int = 8) -> list[int]:
    """Sum, in one thread per offset, the numbers equal to that offset modulo `workers`."""
    shared = tuple(numbers)

    def sum_offset(offset: int) -> int:
        total = sum(n for n in shared if n % workers == offset)
        print(f"Sum of offset {offset} is {total}")
        return total

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(sum_offset, range(workers)))