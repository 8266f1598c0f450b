"""Record id and timestamp helpers."""

from datetime import datetime
from typing import Callable, Iterable

Clock = Callable[[], datetime]

# Time part of en-US toLocaleString(); month, day and hour are not zero-padded
TIME_FORMAT = "%M:%S %p"


def format_timestamp(moment: datetime) -> str:
    """Format a moment the way history entries display it."""
    hour = moment.hour % 12 or 12
    return f"{moment.month}/{moment.day}/{moment.year}, {hour}:{moment.strftime(TIME_FORMAT)}"


class MonotonicIdFactory:
    """Millisecond-clock ids that never repeat within a collection.

    Two records created in the same millisecond get consecutive ids.
    """

    def __init__(self, clock: Clock = datetime.now, existing: Iterable[int] = ()):
        self.clock = clock
        self._last = max(existing, default=0)

    def __call__(self) -> int:
        candidate = int(self.clock().timestamp() * 1000)
        self._last = max(candidate, self._last + 1)
        return self._last
