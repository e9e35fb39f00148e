"""Unit tests for TeamDirectoryStub."""

import pytest

from printflow.domain.models.actor import Team
from printflow.infrastructure.stubs.team_directory_stub import (
    DEFAULT_TEAM_MEMBERS,
    TeamDirectoryStub,
)


class TestTeamDirectoryStub:
    @pytest.mark.asyncio
    async def test_default_rosters(self, team_directory: TeamDirectoryStub) -> None:
        assert await team_directory.members_of(Team.DESIGN.value) == {"design-1", "design-2"}
        assert await team_directory.members_of(Team.MANAGER.value) == {"manager-1"}

    def test_every_team_has_a_default_roster(self) -> None:
        assert set(DEFAULT_TEAM_MEMBERS) == {team.value for team in Team}

    @pytest.mark.asyncio
    async def test_unknown_team_is_empty(self, team_directory: TeamDirectoryStub) -> None:
        assert await team_directory.members_of("night-shift") == frozenset()

    @pytest.mark.asyncio
    async def test_custom_and_replaced_rosters(self) -> None:
        directory = TeamDirectoryStub({Team.SALES.value: ["s-9"]})
        assert await directory.members_of(Team.SALES.value) == {"s-9"}
        assert await directory.members_of(Team.DESIGN.value) == frozenset()

        directory.set_members(Team.SALES.value, ["s-1", "s-2"])
        assert await directory.members_of(Team.SALES.value) == {"s-1", "s-2"}
