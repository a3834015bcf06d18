"""
Bounded provider calls.

Every call that leaves the process (embedding, upsert, similarity search,
generation) runs under a timeout. Timeouts are retried with exponential
backoff; any other failure is wrapped in ProviderError and surfaces at once.

Dependencies: tenacity, docqa.core.exceptions
System role: Timeout and retry policy for external providers
"""

import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from docqa.core.exceptions import DocQAException, ProviderError, ProviderTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def _call_once(
    operation: str,
    call: Callable[[], Awaitable[T]],
    timeout: float,
) -> T:
    try:
        return await asyncio.wait_for(call(), timeout=timeout)
    except asyncio.TimeoutError as e:
        raise ProviderTimeoutError(
            f"{operation} timed out after {timeout}s",
            operation=operation,
            details={"timeout_seconds": timeout},
        ) from e
    except DocQAException:
        raise
    except Exception as e:
        raise ProviderError(f"{operation} failed: {e}", operation=operation) from e


async def call_provider(
    operation: str,
    call: Callable[[], Awaitable[T]],
    *,
    timeout: float = 60.0,
    max_attempts: int = 3,
    initial_wait: float = 1.0,
) -> T:
    """
    Run a provider coroutine with a timeout and bounded retry.

    Args:
        operation: Operation name used in logs and errors (embed, upsert, search, generate)
        call: Zero-argument factory returning a fresh awaitable per attempt
        timeout: Per-attempt timeout in seconds
        max_attempts: Total attempts before the timeout error is re-raised
        initial_wait: First backoff delay in seconds

    Returns:
        T: Result of the provider call

    Raises:
        ProviderTimeoutError: Every attempt timed out
        ProviderError: Provider raised any other exception (not retried)
    """
    retrying = AsyncRetrying(
        retry=retry_if_exception_type(ProviderTimeoutError),
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential_jitter(initial=initial_wait, max=30, jitter=initial_wait),
        before_sleep=lambda retry_state: logger.warning(
            f"{__name__}:call_provider - Retry {retry_state.attempt_number}/{max_attempts} "
            f"after timeout",
            extra={"operation": operation},
        ),
        reraise=True,
    )

    async for attempt in retrying:
        with attempt:
            return await _call_once(operation, call, timeout)

    raise ProviderError(f"{operation} exhausted retries", operation=operation)
