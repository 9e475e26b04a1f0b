#!/usr/bin/env python3
"""
Concurrency Limiter
Runs a batch of blocking tasks with a cap on how many execute at once
"""

import threading
import concurrent.futures
from typing import Any, Callable, Dict, Iterable, List, Optional
import logging

from .exceptions import ValidationError

logger = logging.getLogger(__name__)


class ConcurrencyLimiter:
    """
    Fixed-size worker pool gate
    - At most max_concurrent tasks execute at any instant
    - Queued tasks start as soon as a running one finishes
    - No ordering guarantee among completions
    """

    def __init__(self, max_concurrent: int = 3):
        """
        Initialize limiter

        Args:
            max_concurrent: Maximum number of tasks executing simultaneously
        """
        if max_concurrent < 1:
            raise ValidationError(f"Concurrency must be at least 1, got {max_concurrent}")

        self.max_concurrent = max_concurrent
        self.in_flight = 0
        self.peak_in_flight = 0
        self.completed = 0
        self.failed = 0
        self.lock = threading.Lock()

    def _enter(self):
        with self.lock:
            self.in_flight += 1
            self.peak_in_flight = max(self.peak_in_flight, self.in_flight)

    def _exit(self, succeeded: bool):
        with self.lock:
            self.in_flight -= 1
            if succeeded:
                self.completed += 1
            else:
                self.failed += 1

    def _run_tracked(self, task: Callable[[], Any]) -> Any:
        self._enter()
        succeeded = False
        try:
            result = task()
            succeeded = True
            return result
        finally:
            self._exit(succeeded)

    def run_all(self, tasks: Iterable[Callable[[], Any]]) -> List[Any]:
        """
        Run every task, at most max_concurrent at a time

        Args:
            tasks: Zero-argument callables

        Returns:
            Task results in submission order

        Raises:
            The first task failure, once every other task has finished
        """
        tasks = list(tasks)
        results: List[Any] = [None] * len(tasks)
        first_error: Optional[BaseException] = None

        logger.debug(f"Running {len(tasks)} tasks with concurrency {self.max_concurrent}")

        with concurrent.futures.ThreadPoolExecutor(max_workers=self.max_concurrent) as executor:
            future_to_index = {
                executor.submit(self._run_tracked, task): index
                for index, task in enumerate(tasks)
            }

            for future in concurrent.futures.as_completed(future_to_index):
                index = future_to_index[future]
                error = future.exception()
                if error is not None:
                    logger.error(f"Task {index} failed: {error}")
                    if first_error is None:
                        first_error = error
                    continue
                results[index] = future.result()

        if first_error is not None:
            raise first_error
        return results

    def get_status(self) -> Dict[str, int]:
        """Snapshot of the limiter counters"""
        with self.lock:
            return {
                "max_concurrent": self.max_concurrent,
                "in_flight": self.in_flight,
                "peak_in_flight": self.peak_in_flight,
                "completed": self.completed,
                "failed": self.failed
            }
