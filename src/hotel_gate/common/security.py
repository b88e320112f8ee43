"""Bearer token authentication dependency."""

from fastapi import Header, HTTPException

_UNAUTHENTICATED = HTTPException(
    status_code=401,
    detail="You must be signed in to continue",
    headers={"WWW-Authenticate": "Bearer"},
)


async def require_user(
    authorization: str | None = Header(None, alias="Authorization"),
) -> int:
    """FastAPI dependency resolving the signed-in user id from a bearer token.

    The token must carry a valid signature and belong to a stored session.
    """
    if not authorization:
        raise _UNAUTHENTICATED

    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        raise _UNAUTHENTICATED

    from hotel_gate.deps import get_db, get_user_service

    svc = get_user_service()
    user_id = svc.read_token(token)
    if user_id is None:
        raise _UNAUTHENTICATED

    db = get_db()
    async with db.get_session() as session:
        stored = await svc.find_session_by_token(session, token)
        if stored is None or stored.user_id != user_id:
            raise _UNAUTHENTICATED
    return user_id
