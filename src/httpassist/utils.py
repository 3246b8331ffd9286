import asyncio
import logging
from typing import Awaitable, Optional, TypeVar

from .http.types import RequestCancelled

T = TypeVar("T")


logger = logging.getLogger("httpassist")


async def cancellable(aw: Awaitable[T], cancel: Optional[asyncio.Event]) -> T:
    """
    Await `aw` unless `cancel` gets set first, in which case `aw` is
    cancelled and RequestCancelled is raised.
    """
    if cancel is None:
        return await aw
    if cancel.is_set():
        if asyncio.iscoroutine(aw):
            aw.close()
        raise RequestCancelled(asyncio.CancelledError())
    task = asyncio.ensure_future(aw)
    waiter = asyncio.ensure_future(cancel.wait())
    try:
        await asyncio.wait({task, waiter}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        task.cancel()
        raise
    finally:
        waiter.cancel()
    if task.done():
        return task.result()
    task.cancel()
    try:
        await task
    except asyncio.CancelledError as exc:
        if _cancelling():
            # the caller itself got cancelled while waiting for the exchange
            raise
        raise RequestCancelled(exc) from None
    return task.result()


def _cancelling() -> bool:
    current = asyncio.current_task()
    # Task.cancelling() exists from Python 3.11 on
    cancelling = getattr(current, "cancelling", None)
    return cancelling is not None and cancelling() > 0
