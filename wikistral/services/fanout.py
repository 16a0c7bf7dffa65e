from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class Outcome(Generic[T]):
    """Settled result of one fan-out branch."""

    value: T | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or(self, fallback: Callable[[], T]) -> T:
        if self.error is not None:
            return fallback()
        return self.value  # type: ignore[return-value]


async def fan_out(awaitables: Iterable[Awaitable[T]]) -> list[Outcome[T]]:
    """Await all branches together and return their outcomes in input order.

    A branch that raises an ``Exception`` yields a failed outcome; its siblings
    still run to completion. Other ``BaseException`` subclasses propagate.
    """
    raw_results = await asyncio.gather(*awaitables, return_exceptions=True)

    outcomes: list[Outcome[T]] = []
    for item in raw_results:
        if isinstance(item, Exception):
            outcomes.append(Outcome(error=item))
        elif isinstance(item, BaseException):
            raise item
        else:
            outcomes.append(Outcome(value=item))
    return outcomes
