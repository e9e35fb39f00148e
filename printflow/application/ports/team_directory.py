"""Team directory port.

Resolves a team (or role) key to the user ids that belong to it. Used
only for notification fan-out.
"""

from __future__ import annotations

from typing import Protocol


class TeamDirectoryProtocol(Protocol):
    """Protocol for team membership lookup."""

    async def members_of(self, team_key: str) -> frozenset[str]:
        """Return the user ids in a team.

        Args:
            team_key: Team or role key, e.g. "design-team" or "manager".

        Returns:
            Member user ids. Unknown keys return an empty set, never raise.
        """
        ...
