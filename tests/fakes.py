# tests/fakes.py

from __future__ import annotations

from datetime import datetime, timedelta, timezone


class FakeClock:
    """
    Deterministic clock for the services.

    Every call returns a time one step later than the previous one, so
    "updated changed" assertions never depend on timer resolution.
    """

    def __init__(
        self,
        start: datetime = datetime(2026, 1, 5, 9, 0, tzinfo=timezone.utc),
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + self.step
        return now
