from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone


class SystemClock:
    """UTC clock that advances with ``time.monotonic``.

    Wall-clock adjustments after construction do not move it backwards,
    so deadlines computed from it stay valid.
    """

    def __init__(self) -> None:
        self._origin = datetime.now(timezone.utc)
        self._origin_ticks = time.monotonic()

    def now(self) -> datetime:
        return self._origin + timedelta(seconds=time.monotonic() - self._origin_ticks)
