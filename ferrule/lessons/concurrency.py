"""Sharing state and data between threads."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor


class JobStatus:
    """A count of completed jobs that threads can update safely."""

    def __init__(self, jobs_completed: int = 0) -> None:
        self._lock = threading.Lock()
        self._jobs_completed = jobs_completed

    @property
    def jobs_completed(self) -> int:
        with self._lock:
            return self._jobs_completed

    def complete_one(self) -> None:
        """Record one more completed job."""
        with self._lock:
            self._jobs_completed += 1


def run_jobs(jobs: int = 10, job_delay: float = 0.25, poll_delay: float = 0.5) -> int:
    """Complete jobs in a worker thread while waiting for them; return the waits."""
    status = JobStatus()

    def work() -> None:
        for _ in range(jobs):
            time.sleep(job_delay)
            status.complete_one()

    worker = threading.Thread(target=work, daemon=True)
    worker.start()
    waits = 0
    while status.jobs_completed < jobs:
        print("waiting... ")
        waits += 1
        time.sleep(poll_delay)
    worker.join()
    return waits


def offset_sums(numbers: Iterable[int], workers: int = 8) -> list[int]:
    """Sum every workers-th number, one thread per starting offset."""
    if workers < 1:
        raise ValueError("workers must be at least 1")
    shared = tuple(numbers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(lambda offset: sum(shared[offset::workers]), range(workers)))