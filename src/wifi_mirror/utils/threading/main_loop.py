"""Funnel session calls onto the main event loop."""

from __future__ import annotations

import asyncio
import threading
from typing import Any, Callable, Optional

_main_loop: Optional[asyncio.AbstractEventLoop] = None
_main_thread_id: Optional[int] = None


def set_main_event_loop(loop: asyncio.AbstractEventLoop) -> None:
    """Register the main event loop and thread identity."""
    global _main_loop, _main_thread_id
    _main_loop = loop
    _main_thread_id = threading.get_ident()


def clear_main_event_loop() -> None:
    """Forget the registered loop, e.g. after it was closed."""
    global _main_loop, _main_thread_id
    _main_loop = None
    _main_thread_id = None


def is_main_thread() -> bool:
    """Return True if the current thread is the registered main thread."""
    return _main_thread_id is not None and threading.get_ident() == _main_thread_id


def call_on_main_loop(
    func: Callable[..., Any], *args: Any, timeout: Optional[float] = None, **kwargs: Any
) -> Any:
    """
    Run a callable on the main loop's thread and wait for its result.

    Session transitions and permission callbacks are synchronous, so the call
    is wrapped in a coroutine and handed to the loop. Runs inline when no loop
    is running or the caller already is the main thread.
    """
    loop = _main_loop
    if loop is None or loop.is_closed() or not loop.is_running() or is_main_thread():
        return func(*args, **kwargs)

    async def _invoke() -> Any:
        return func(*args, **kwargs)

    return asyncio.run_coroutine_threadsafe(_invoke(), loop).result(timeout=timeout)
