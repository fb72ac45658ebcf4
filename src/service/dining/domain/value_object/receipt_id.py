import time
from typing import Callable


RECEIPT_PREFIX = 'order_rcptid_'


class ReceiptIdGenerator:
    """
    Receipt ids of the form `order_rcptid_<n>`.

    `<n>` is the millisecond wall clock scaled by 1000 and bumped past the last
    issued value, so it is strictly increasing even for calls in the same
    millisecond or after a backwards clock step.
    """

    def __init__(self, *, clock_ms: Callable[[], int] | None = None) -> None:
        self._clock_ms = clock_ms or (lambda: time.time_ns() // 1_000_000)
        self._last = 0

    def next_id(self) -> str:
        candidate = self._clock_ms() * 1000
        self._last = max(candidate, self._last + 1)
        return f'{RECEIPT_PREFIX}{self._last}'
