"""Time authority port.

Services that stamp tasks, notes or notifications take a
TimeAuthorityProtocol instead of calling ``datetime.now()`` so tests can
freeze and advance the clock.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Abstract clock.

    For production:
        Use SystemTimeAuthority from printflow.infrastructure.adapters

    For testing:
        Use FakeTimeAuthority from tests/helpers/fake_time_authority.py
    """

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        ...
