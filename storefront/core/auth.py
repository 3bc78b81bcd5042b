# storefront/core/auth.py
import uuid

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlmodel import Session

from storefront.core.security import decode_access_token
from storefront.database import get_session
from storefront.models.user import User

# HTTP Bearer scheme:
# - auto_error=False => missing Authorization header will NOT raise immediately
#   so anonymous shoppers can still browse and use the session cart.
bearer_scheme = HTTPBearer(auto_error=False)


def _not_authenticated() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Not authenticated",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: Session = Depends(get_session),
) -> User | None:
    """
    Resolve the current user from a Bearer access token.

    Flow:
      1. If no Authorization header => guest => return None.
      2. Decode JWT => extract 'sub' (user id).
      3. Load the user row.

    Raises:
        HTTPException(401): if the token is invalid/expired or the user
        no longer exists.
    """
    if credentials is None:
        return None  # guest mode

    try:
        payload = decode_access_token(credentials.credentials)
        user_id = uuid.UUID(payload.get("sub") or "")
    except (JWTError, ValueError):
        raise _not_authenticated()

    user = session.get(User, user_id)
    if user is None:
        raise _not_authenticated()
    return user


def require_auth(user: User | None = Depends(get_current_user)) -> User:
    """
    Enforce authentication.

    If attached to a route, guests will be rejected with 401.
    """
    if user is None:
        raise _not_authenticated()
    return user
