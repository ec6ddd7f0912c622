# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Single-shot completion helpers for service calls.

Service methods are coroutines that either return a decoded model or raise.
Callers that prefer a value-or-error result, or a success/failure callback
pair, can wrap any such coroutine::

    result = await capture(remote.get_backup_status(site_id))
    if isinstance(result, Success):
        print(result.value.download_id)

    await dispatch(remote.get_backup_status(site_id), on_success, on_failure)
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

logger = logging.getLogger("wpkit.core.completion")

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Terminal outcome carrying the decoded value."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Terminal outcome carrying the error exactly as it was raised."""

    error: Exception

    @property
    def ok(self) -> bool:
        return False


Result = Success[T] | Failure


async def capture(call: Awaitable[T]) -> Result[T]:
    """Await *call* and fold its outcome into a :data:`Result`."""
    try:
        value = await call
    except Exception as exc:
        return Failure(exc)
    return Success(value)


async def dispatch(
    call: Awaitable[T],
    on_success: Callable[[T], None],
    on_failure: Callable[[Exception], None],
) -> None:
    """Await *call* and invoke exactly one of the two callbacks, once.

    Errors raised by *on_success* propagate to the caller and are never
    routed to *on_failure*.
    """
    result = await capture(call)
    if isinstance(result, Success):
        on_success(result.value)
    else:
        logger.debug("Dispatching failure: %r", result.error)
        on_failure(result.error)
