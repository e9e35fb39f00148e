"""FakeTimeAuthority - frozen clock for deterministic tests.

Task, note and notification timestamps all come from the injected
TimeAuthorityProtocol. Tests freeze the clock and move it explicitly so
``created_at`` / ``updated_at`` assertions can be exact.

    >>> clock = FakeTimeAuthority(frozen_at=datetime(2026, 1, 15, 10, 0, tzinfo=timezone.utc))
    >>> clock.advance(hours=1)
    >>> clock.now()
    datetime.datetime(2026, 1, 15, 11, 0, tzinfo=datetime.timezone.utc)
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from printflow.application.ports.time_authority import TimeAuthorityProtocol

DEFAULT_FROZEN_AT = datetime(2026, 1, 1, 0, 0, 0, tzinfo=timezone.utc)


def _as_utc(value: datetime) -> datetime:
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


class FakeTimeAuthority(TimeAuthorityProtocol):
    """Clock that only moves when a test moves it.

    Naive datetimes passed in are taken as UTC.
    """

    def __init__(self, frozen_at: datetime | None = None) -> None:
        self._current_time = _as_utc(frozen_at or DEFAULT_FROZEN_AT)

    def now(self) -> datetime:
        return self._current_time

    def advance(
        self,
        seconds: float = 0,
        *,
        minutes: float = 0,
        hours: float = 0,
        days: float = 0,
    ) -> None:
        """Move the clock forward.

        Raises:
            ValueError: If the total step is negative.
        """
        step = timedelta(seconds=seconds, minutes=minutes, hours=hours, days=days)
        if step < timedelta(0):
            raise ValueError(f"clock cannot move backwards (step={step})")
        self._current_time += step

    def set_time(self, dt: datetime) -> None:
        """Jump to ``dt``, forwards or backwards."""
        self._current_time = _as_utc(dt)

    def __repr__(self) -> str:
        return f"FakeTimeAuthority(now={self._current_time.isoformat()})"
