"""
Task Executors
Dispatch strategies for the asynchronous detector API. A strategy is any
callable `execute(task)` that runs a zero-argument task at some point; it
returns nothing and gives no ordering guarantee between tasks.
"""

import logging
import threading
from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

logger = logging.getLogger(__name__)

Task = Callable[[], None]
Execute = Callable[[Task], None]

POLICY_THREAD = 'thread'
POLICY_POOL = 'pool'
POLICY_INLINE = 'inline'


def run_inline(task: Task) -> None:
    """Run the task immediately on the caller's thread."""
    task()


def run_in_thread(task: Task) -> None:
    """Start a new daemon thread per task."""
    threading.Thread(target=task, name='detector-task', daemon=True).start()


def _log_failure(future: Future) -> None:
    error = future.exception()
    if error is not None:
        logger.error("Detector task failed", exc_info=(type(error), error, error.__traceback__))


class PooledExecutor:
    """Callable strategy backed by a fixed-size thread pool."""

    def __init__(self, max_workers: int = 4):
        self.max_workers = max_workers
        self._pool = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix='detector')

    def __call__(self, task: Task) -> None:
        self._pool.submit(task).add_done_callback(_log_failure)

    def shutdown(self, wait: bool = True) -> None:
        self._pool.shutdown(wait=wait)


def get_task_executor(policy: Optional[str] = None, pool_size: Optional[int] = None) -> Execute:
    """Build the dispatch strategy named by `policy` (defaults from Config)."""
    if policy is None or pool_size is None:
        from config import Config
        dispatch_config = Config.get_dispatch_config()
        policy = policy or dispatch_config['policy']
        pool_size = pool_size or dispatch_config['pool_size']

    if policy == POLICY_INLINE:
        return run_inline
    if policy == POLICY_POOL:
        return PooledExecutor(max_workers=pool_size)
    if policy == POLICY_THREAD:
        return run_in_thread
    raise ValueError(f"Unknown dispatch policy '{policy}' (expected thread, pool or inline)")


def _do_nothing() -> None:
    pass


class OnceAction:
    """
    Holds an action that may be claimed exactly once from any thread.

    The action sits in a single-slot deque; `popleft` is atomic, so exactly
    one claimant receives it and every later claimant gets a no-op.
    """

    def __init__(self, action: Task):
        self._pending = deque([action], maxlen=1)

    def claim(self) -> Task:
        try:
            return self._pending.popleft()
        except IndexError:
            return _do_nothing

    def fire(self) -> None:
        self.claim()()

    @property
    def claimed(self) -> bool:
        return not self._pending
