"""Fixed-size worker pool draining an ordered task list.

Workers share nothing but the cursor. Each claim moves a task from pending to
running under the cursor lock, so no task runs twice. The first failure closes
the cursor: running tasks finish, unclaimed tasks stay pending.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional, Sequence

from ..models.task import DtsTask, PoolResult

# (input path, output path) -> process exit code, 0 meaning success
Job = Callable[[str, str], int]


class TaskCursor:
    def __init__(self, tasks: Sequence[DtsTask]) -> None:
        self._tasks = list(tasks)
        self._next = 0
        self._closed = False
        self._lock = threading.Lock()

    def claim(self) -> Optional[DtsTask]:
        """Return the next pending task marked running, or None when drained or closed."""
        with self._lock:
            if self._closed or self._next >= len(self._tasks):
                return None
            task = self._tasks[self._next]
            self._next += 1
            task.state = "running"
            return task

    def close(self) -> None:
        with self._lock:
            self._closed = True

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed


class TaskPool:
    def __init__(self, job: Job, worker_count: int) -> None:
        if worker_count < 1:
            raise ValueError(f"worker_count must be at least 1, got {worker_count}")
        self.job = job
        self.worker_count = worker_count

    def _worker(self, cursor: TaskCursor) -> None:
        while True:
            task = cursor.claim()
            if task is None:
                return
            try:
                code = self.job(task.input_path, task.output_path)
            except Exception as exc:
                task.state = "failed"
                task.error = f"{type(exc).__name__}: {exc}"
                cursor.close()
                continue
            if code == 0:
                task.state = "succeeded"
            else:
                task.state = "failed"
                task.error = f"exit code {code}"
                cursor.close()

    def run(self, tasks: Sequence[DtsTask]) -> PoolResult:
        """Run every task at most once with at most ``worker_count`` in flight."""
        ordered = list(tasks)
        cursor = TaskCursor(ordered)
        with ThreadPoolExecutor(max_workers=self.worker_count) as executor:
            workers = [executor.submit(self._worker, cursor) for _ in range(self.worker_count)]
            for worker in workers:
                worker.result()
        return PoolResult(tasks=ordered, worker_count=self.worker_count)
