# storefront/routers/auth.py
from fastapi import APIRouter, Depends, Request, status
from sqlmodel import Session

from storefront.core.auth import require_auth
from storefront.database import get_session
from storefront.models.user import User
from storefront.repositories.user_repo import UserRepository
from storefront.schemas.user import AuthResponse, UserCreate, UserLogin, UserRead
from storefront.services.user_service import UserService

router = APIRouter(tags=["Auth"])

repo = UserRepository()
service = UserService(repo)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: UserCreate,
    session: Session = Depends(get_session),
):
    """
    Create an account with email + password.

    Returns the user and a Bearer access token.
    """
    return service.register(session, payload)


@router.post("/login", response_model=AuthResponse)
def login(
    payload: UserLogin,
    session: Session = Depends(get_session),
):
    """
    Exchange email + password for a Bearer access token.
    """
    return service.login(session, payload)


@router.post("/logout")
def logout(request: Request) -> dict[str, str]:
    """
    Drop the browser session (and with it the anonymous cart key).

    Access tokens are stateless; the client discards its token.
    """
    request.session.clear()
    return {"message": "Logged out successfully"}


@router.get("/user", response_model=UserRead)
def read_user(current_user: User = Depends(require_auth)):
    """
    Return the authenticated user's profile.

    Auth:
      - Requires a valid Bearer token.
    """
    return current_user
