# storefront/services/user_service.py
import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from storefront.core.security import create_access_token, hash_password, verify_password
from storefront.models.user import User
from storefront.repositories.user_repo import UserRepository
from storefront.schemas.user import AuthResponse, UserCreate, UserLogin, UserRead

logger = logging.getLogger(__name__)


class UserService:
    """
    Business logic for customer accounts.

    Responsibilities:
      - registration (unique email, bcrypt hashing)
      - credential checks on login
      - issuing access tokens
    """

    def __init__(self, repo: UserRepository):
        self.repo = repo

    @staticmethod
    def _auth_response(user: User) -> AuthResponse:
        return AuthResponse(
            user=UserRead.model_validate(user),
            access_token=create_access_token(str(user.id)),
        )

    def register(self, session: Session, payload: UserCreate) -> AuthResponse:
        """
        Create an account and log it in.

        Raises:
            HTTPException(400): if the email is already registered.
        """
        if self.repo.get_by_email(session, payload.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="User already exists with this email",
            )

        user = User(
            email=payload.email,
            password=hash_password(payload.password),
            first_name=payload.first_name,
            last_name=payload.last_name,
        )
        user = self.repo.create(session, user)
        logger.info("registered user %s", user.id)
        return self._auth_response(user)

    def login(self, session: Session, payload: UserLogin) -> AuthResponse:
        """
        Check credentials and issue a token.

        Unknown email and wrong password give the same 401.
        """
        user = self.repo.get_by_email(session, payload.email)
        if not user or not verify_password(payload.password, user.password):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid email or password",
            )
        return self._auth_response(user)

