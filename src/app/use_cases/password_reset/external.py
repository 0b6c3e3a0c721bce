import asyncio
from typing import Awaitable, TypeVar

T = TypeVar("T")


async def bounded(call: Awaitable[T], timeout_seconds: float) -> T:
    """
    Await an outbound call with a deadline.

    Raises asyncio.TimeoutError when the deadline passes; callers treat that
    like any other failure of the collaborator.
    """
    return await asyncio.wait_for(call, timeout=timeout_seconds)
