"""Caller identity.

Authentication happens in front of this service; the platform forwards the
authenticated user's ID in the ``X-User-Id`` header.
"""

from uuid import UUID

from fastapi import Header, HTTPException, status


async def current_user_id(x_user_id: str | None = Header(default=None)) -> UUID:
    """Read the caller's user ID from the request headers.

    Raises:
        HTTPException: 401 if the header is missing or not a UUID
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    try:
        return UUID(x_user_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid user identity",
        )
