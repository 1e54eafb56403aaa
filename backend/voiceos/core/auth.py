"""
Authentication Utilities

Verifies bearer tokens issued by the external identity provider and exposes
the caller's user id as a FastAPI dependency. Passwords never reach this
service.
"""
from typing import Optional
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt

from voiceos.core.config import JWT_SECRET_KEY, JWT_ALGORITHM, JWT_AUDIENCE

# Security scheme
security = HTTPBearer(auto_error=False)


def verify_token(token: str) -> Optional[dict]:
    """Verify and decode an identity-provider JWT."""
    try:
        return jwt.decode(
            token,
            JWT_SECRET_KEY,
            algorithms=[JWT_ALGORITHM],
            audience=JWT_AUDIENCE,
            options={"verify_aud": JWT_AUDIENCE is not None},
        )
    except JWTError:
        return None


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> str:
    """
    FastAPI dependency returning the authenticated user's id (`sub` claim).
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not credentials:
        raise credentials_exception

    payload = verify_token(credentials.credentials)
    if not payload or not payload.get("sub"):
        raise credentials_exception

    return payload["sub"]
