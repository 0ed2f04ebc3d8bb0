"""Console progress reporting for seeding loops."""

import sys
from collections.abc import Awaitable, Callable
from typing import TextIO, TypeVar

from tqdm import tqdm

T = TypeVar("T")


async def with_progress_bar(
    amount: int,
    factory: Callable[[], Awaitable[T | list[T]]],
    *,
    file: TextIO | None = None,
) -> list[T]:
    """Await *factory* ``amount`` times behind a progress bar.

    A factory may return a single row or a list of rows; everything it
    produces is collected into one flat list, in call order.
    """
    items: list[T] = []

    with tqdm(total=amount, file=file or sys.stdout, leave=True, dynamic_ncols=True) as progress_bar:
        for _ in range(amount):
            result = await factory()
            if isinstance(result, list):
                items.extend(result)
            else:
                items.append(result)
            progress_bar.update(1)

    return items
