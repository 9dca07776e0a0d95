"""Run one blocking operation off the calling thread.

Every explorefs operation blocks an OS thread for its whole duration,
subprocess waits included. Interactive callers hand each operation to
run_detached() and pick the result up from the returned Future. There is
no pool and no way to abort an operation once it has started.
"""

import threading
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any, TypeVar

T = TypeVar("T")


def run_detached(fn: Callable[..., T], *args: Any, **kwargs: Any) -> "Future[T]":
    """Start fn(*args, **kwargs) on a dedicated daemon thread.

    Args:
        fn: Blocking callable, e.g. FileExplorer.copy.
        *args: Positional arguments for fn.
        **kwargs: Keyword arguments for fn.

    Returns:
        Future resolved with fn's return value, or with the exception it raised.
        Cancelling the Future only has an effect before the thread picks it up.
    """
    future: Future[T] = Future()

    def _target() -> None:
        if not future.set_running_or_notify_cancel():
            return
        try:
            result = fn(*args, **kwargs)
        except Exception as e:
            future.set_exception(e)
        else:
            future.set_result(result)

    name = getattr(fn, "__name__", "operation")
    threading.Thread(target=_target, name=f"explorefs-{name}", daemon=True).start()
    return future
