"""
Callback Adapters
=================
Completion-callback entry points over the async operations.

The callback is called as ``callback(error, result)``: error is None on
success, otherwise result is None. Errors are only ever delivered to the
callback, never raised from the call that scheduled the work.

Inside a running event loop the work is scheduled as a task. Without one
it runs on a single background event loop shared by all callers, and the
callback is invoked from that loop's thread.
"""

import asyncio
import threading
from concurrent.futures import Future
from functools import partial
from typing import Any, Awaitable, Callable, Mapping, Optional, Set, Union
import structlog

from .async_ops import hash_password, verify_password

logger = structlog.get_logger(__name__)

Callback = Callable[[Optional[BaseException], Any], None]

_background_loop: Optional[asyncio.AbstractEventLoop] = None
_background_lock = threading.Lock()

# Keep scheduled tasks alive until they finish
_pending_tasks: Set[asyncio.Task] = set()


def get_background_loop() -> asyncio.AbstractEventLoop:
    """Get the shared loop for callers without one, starting it on first use."""
    global _background_loop
    
    with _background_lock:
        if _background_loop is None:
            loop = asyncio.new_event_loop()
            threading.Thread(
                target=loop.run_forever,
                name="hashy-callback-loop",
                daemon=True,
            ).start()
            _background_loop = loop
    return _background_loop


def _deliver(callback: Callback, future) -> None:
    if future.cancelled():
        error, result = asyncio.CancelledError(), None
    else:
        error = future.exception()
        result = None if error is not None else future.result()
    
    try:
        callback(error, result)
    except Exception:
        logger.exception(
            "callback_failed",
            callback=getattr(callback, "__qualname__", repr(callback)),
        )


def as_callback(
    coro_func: Callable[..., Awaitable[Any]],
    *args,
    callback: Callback,
    **kwargs,
) -> Union[asyncio.Task, Future]:
    """
    Run an async operation and report its outcome to a callback.
    
    Returns:
        The scheduled asyncio.Task, or a concurrent Future when no event
        loop is running in this thread (the work then runs on the shared
        background loop)
    """
    async def run():
        return await coro_func(*args, **kwargs)
    
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        loop = None
    
    if loop is None:
        future = asyncio.run_coroutine_threadsafe(run(), get_background_loop())
    else:
        future = loop.create_task(run())
        _pending_tasks.add(future)
        future.add_done_callback(_pending_tasks.discard)
    
    future.add_done_callback(partial(_deliver, callback))
    return future


def hash_with_callback(
    password: str,
    algorithm: Optional[str] = None,
    options: Optional[Mapping[str, int]] = None,
    *,
    callback: Callback,
):
    """Callback form of hash_password."""
    return as_callback(hash_password, password, algorithm, options, callback=callback)


def verify_with_callback(password: str, hash: str, *, callback: Callback):
    """Callback form of verify_password."""
    return as_callback(verify_password, password, hash, callback=callback)
