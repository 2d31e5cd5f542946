"""Service for generating run timestamps."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"


class TimestampFactory:
    """Builds second-resolution timestamps used in artifact names."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._clock = clock

    def create(self) -> str:
        """Return the current local time as ``YYYYMMDD-HHMMSS``."""
        return self._clock().strftime(TIMESTAMP_FORMAT)
