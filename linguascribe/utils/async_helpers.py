"""
Run gateway coroutines from synchronous code
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Awaitable, TypeVar

T = TypeVar('T')


def sync_wrapper(coro: Awaitable[T]) -> T:
    """
    Block until a gateway coroutine finishes and return its result.

    With no running loop the coroutine gets its own ``asyncio.run``. Inside a
    running loop (a notebook cell, a Textual handler) that loop cannot be
    re-entered, so the coroutine runs on a fresh loop in a helper thread.
    Exceptions propagate to the caller unchanged.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="linguascribe-sync") as executor:
        return executor.submit(asyncio.run, coro).result()
