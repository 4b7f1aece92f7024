import logging
from datetime import datetime, timedelta
from typing import Optional

import bcrypt
from jose import jwt, JWTError

from app.core.exceptions import (
    EmailAlreadyExistsError,
    InvalidCredentialError,
    UserNotFoundError,
)
from app.models.user import User
from app.repositories.contracts import UserRepositoryContract
from app.schemas.auth import AuthResponse, UserLogin, UserRead, UserRegister

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(
            self,
            repo: UserRepositoryContract,
            secret_key: str,
            algorithm: str = "HS256",
            access_token_expire_minutes: int = 60 * 24 * 7,
    ):
        self.repo = repo
        self.SECRET_KEY = secret_key
        self.ALGORITHM = algorithm
        self.ACCESS_TOKEN_EXPIRE_MINUTES = access_token_expire_minutes

    def hash_password(self, password: str) -> str:
        salt = bcrypt.gensalt()
        hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
        return hashed.decode('utf-8')

    def verify_password(self, plain_password: str, hashed_password: Optional[str]) -> bool:
        if not hashed_password:
            return False
        try:
            return bcrypt.checkpw(
                plain_password.encode('utf-8'),
                hashed_password.encode('utf-8')
            )
        except ValueError:
            # stored value is not a bcrypt hash
            return False

    def create_access_token(self, user: User, expires_delta: Optional[timedelta] = None) -> str:
        if expires_delta:
            expire = datetime.utcnow() + expires_delta
        else:
            expire = datetime.utcnow() + timedelta(minutes=self.ACCESS_TOKEN_EXPIRE_MINUTES)
        to_encode = {"sub": str(user.id), "email": user.email, "exp": expire}
        return jwt.encode(to_encode, self.SECRET_KEY, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> int:
        """Return the user id carried by a valid access token."""
        try:
            payload = jwt.decode(token, self.SECRET_KEY, algorithms=[self.ALGORITHM])
        except JWTError:
            raise InvalidCredentialError("invalid or expired token")

        subject = payload.get("sub")
        if subject is None:
            raise InvalidCredentialError("invalid or expired token")
        try:
            return int(subject)
        except (TypeError, ValueError):
            raise InvalidCredentialError("invalid or expired token")

    def _auth_response(self, user: User) -> AuthResponse:
        return AuthResponse(
            token=self.create_access_token(user),
            user=UserRead.model_validate(user),
        )

    async def register(self, user_data: UserRegister) -> AuthResponse:
        if await self.repo.exists_by_email(user_data.email):
            raise EmailAlreadyExistsError()

        new_user = User(
            email=user_data.email,
            password=self.hash_password(user_data.password),
            name=user_data.name,
            height=user_data.height,
            created_at=datetime.utcnow(),
        )
        new_user = await self.repo.create_user(new_user)
        logger.info("Registered user %s", new_user.id)
        return self._auth_response(new_user)

    async def login(self, login_data: UserLogin) -> AuthResponse:
        user = await self.repo.get_by_email(login_data.email)
        # unknown email and wrong password are reported the same way
        if not user or not self.verify_password(login_data.password, user.password):
            raise InvalidCredentialError()
        return self._auth_response(user)

    async def get_user(self, user_id: int) -> User:
        user = await self.repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user

    async def delete_account(self, user_id: int) -> None:
        await self.get_user(user_id)
        await self.repo.delete_with_all_data(user_id)
