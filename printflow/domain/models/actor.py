"""Actor, role and team value objects.

Roles and teams are closed enumerations. Raw strings coming from the
identity provider or the HTTP layer are parsed at the edge with
``Role(value)`` / ``Team(value)``; nothing inside the core matches on
free-form role strings.

Developer Golden Rules:
1. Roles are attributes of the caller, never stored on a Task
2. Teams are recipient groups and assignment targets
3. Actor is IMMUTABLE - frozen dataclass
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Role(StrEnum):
    """Roles an actor may hold when acting on a task.

    SALES_TEAM appears in the status policy (it may deliver a job) even
    though no demo account carries it.
    """

    MANAGER = "manager"
    SALES_MANAGER = "sales-manager"
    DESIGN_TEAM = "design-team"
    PRODUCTION_TEAM = "production-team"
    SALES_TEAM = "sales-team"


class Team(StrEnum):
    """Named user groups used for assignment and notification fan-out."""

    DESIGN = "design-team"
    PRODUCTION = "production-team"
    SALES = "sales-team"
    SALES_MANAGER = "sales-manager"
    MANAGER = "manager"


@dataclass(frozen=True, eq=True)
class Actor:
    """The authenticated caller of a workflow operation.

    Attributes:
        id: User identifier from the identity provider.
        name: Display name, copied onto audit notes.
        role: Role the caller acts under.
    """

    id: str
    name: str
    role: Role

    def __post_init__(self) -> None:
        if not self.id or not self.id.strip():
            raise ValueError("actor id is required")
        if not isinstance(self.role, Role):
            raise TypeError(f"role must be a Role, got {type(self.role).__name__}")
