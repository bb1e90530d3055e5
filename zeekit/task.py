"""A pool of worker threads that runs background tasks."""

from __future__ import annotations

import itertools
import os
import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from types import TracebackType

TaskId = int


class TaskPool:
    """Runs tasks on worker threads, handing each one a unique, increasing id."""

    def __init__(self, num_threads: int | None = None) -> None:
        if num_threads is None:
            # Leave two CPUs free for drawing and for other programs.
            num_threads = max(1, (os.cpu_count() or 1) - 2)
        if num_threads < 1:
            raise ValueError("a task pool needs at least one thread")
        self.num_threads = num_threads
        self._executor = ThreadPoolExecutor(
            max_workers=num_threads, thread_name_prefix="task-pool"
        )
        self._ids = itertools.count()
        self._lock = threading.Lock()

    def spawn(self, task: Callable[[TaskId], object]) -> TaskId:
        """Schedule ``task(task_id)`` on the pool and return its id."""
        with self._lock:
            task_id = next(self._ids)
        self._executor.submit(task, task_id)
        return task_id

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting tasks, optionally waiting for running ones to finish."""
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> TaskPool:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.shutdown(wait=True)