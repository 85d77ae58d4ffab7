"""Run detection coroutines from synchronous code."""

import asyncio
from collections.abc import Coroutine
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeVar

T = TypeVar("T")


def run_async_safely(coro: Coroutine[Any, Any, T]) -> T:
    """
    Drive *coro* to completion and return its result.

    Without a running event loop this is plain asyncio.run(). Inside one
    (a notebook, an async web app) the coroutine gets its own loop on a
    worker thread, since asyncio refuses to nest loops.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)

    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="cloud-detect") as executor:
        return executor.submit(asyncio.run, coro).result()
