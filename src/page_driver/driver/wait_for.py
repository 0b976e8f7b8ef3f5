"""
Polling wait used for element existence and visibility checks.
"""

import asyncio
from typing import Callable, Optional, TypeVar

from page_driver.exceptions import WaitForTimeoutError

T = TypeVar("T")


async def wait_for(
    condition: Callable[[], Optional[T]],
    delay_ms: float,
    timeout_ms: float,
) -> T:
    """
    Poll a condition until it produces a value.
    
    The condition is checked immediately and then every ``delay_ms``
    until it returns something other than None. A non-positive timeout
    leaves room for the immediate check only.
    
    Args:
        condition: Callable returning the awaited value or None
        delay_ms: Interval between checks
        timeout_ms: Maximum time to keep polling
        
    Returns:
        The first non-None value returned by the condition
        
    Raises:
        WaitForTimeoutError: If the timeout expires first
    """
    loop = asyncio.get_running_loop()
    
    result = condition()
    if result is not None:
        return result
    
    deadline = loop.time() + max(timeout_ms, 0) / 1000
    while True:
        remaining = deadline - loop.time()
        if remaining <= 0:
            raise WaitForTimeoutError(timeout_ms)
        
        await asyncio.sleep(min(delay_ms / 1000, remaining))
        
        result = condition()
        if result is not None:
            return result
