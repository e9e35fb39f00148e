"""Acting-user dependency.

The identity provider in front of the API authenticates the user and
forwards id, display name and role as headers. This dependency only
parses them; it performs no authentication of its own.
"""

from fastapi import Header, HTTPException

from printflow.domain.models.actor import Actor, Role

ACTOR_ID_HEADER = "X-Actor-Id"
ACTOR_NAME_HEADER = "X-Actor-Name"
ACTOR_ROLE_HEADER = "X-Actor-Role"


async def get_actor(
    x_actor_id: str | None = Header(default=None, alias=ACTOR_ID_HEADER),
    x_actor_name: str | None = Header(default=None, alias=ACTOR_NAME_HEADER),
    x_actor_role: str | None = Header(default=None, alias=ACTOR_ROLE_HEADER),
) -> Actor:
    """Build the Actor for the current request.

    Raises:
        HTTPException: 401 if id or role is missing, 400 if the role is unknown.
    """
    if not x_actor_id or not x_actor_role:
        raise HTTPException(
            status_code=401,
            detail=f"{ACTOR_ID_HEADER} and {ACTOR_ROLE_HEADER} headers are required",
        )
    try:
        role = Role(x_actor_role)
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown role: {x_actor_role}",
        ) from e
    return Actor(id=x_actor_id, name=x_actor_name or x_actor_id, role=role)
