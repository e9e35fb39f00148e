"""System clock implementation of TimeAuthorityProtocol."""

from datetime import datetime, timezone

from printflow.application.ports.time_authority import TimeAuthorityProtocol


class SystemTimeAuthority(TimeAuthorityProtocol):
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
