"""Team directory stub.

Static in-memory team membership. The default roster mirrors the demo
accounts used during development.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from printflow.application.ports.team_directory import TeamDirectoryProtocol
from printflow.domain.models.actor import Team

DEFAULT_TEAM_MEMBERS: Mapping[str, frozenset[str]] = {
    Team.DESIGN.value: frozenset({"design-1", "design-2"}),
    Team.PRODUCTION.value: frozenset({"production-1", "production-2"}),
    Team.SALES.value: frozenset({"sales-1", "sales-2"}),
    Team.SALES_MANAGER.value: frozenset({"sales-manager-1"}),
    Team.MANAGER.value: frozenset({"manager-1"}),
}


class TeamDirectoryStub(TeamDirectoryProtocol):
    """In-memory team directory keyed by team value ("design-team", ...)."""

    def __init__(self, members: Mapping[str, Iterable[str]] | None = None) -> None:
        source = DEFAULT_TEAM_MEMBERS if members is None else members
        self._members: dict[str, frozenset[str]] = {
            key: frozenset(ids) for key, ids in source.items()
        }

    async def members_of(self, team_key: str) -> frozenset[str]:
        return self._members.get(team_key, frozenset())

    def set_members(self, team_key: str, member_ids: Iterable[str]) -> None:
        """Replace a team's roster (for testing)."""
        self._members[team_key] = frozenset(member_ids)
