"""
Service for user registration, login and bearer tokens
"""

from datetime import datetime, timedelta, timezone

import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from family_tree.database.models import User
from family_tree.repositories.base_repository import as_uuid
from family_tree.repositories.user_repository import UserRepository
from family_tree.services.base_service import BaseService
from family_tree.services.exceptions import (
    AuthenticationError,
    EmailAlreadyRegisteredError,
    UserNotFoundError,
    ValidationError,
    handle_service_exceptions,
)
from family_tree.shared.logging_config import get_project_logger


logger = get_project_logger(__name__)

MIN_PASSWORD_LENGTH = 6
TOKEN_ALGORITHM = 'HS256'
INVALID_CREDENTIALS = "invalid email or password"


class AuthService(BaseService):
    """Accounts and HS256 JWT tokens carrying ``user_id``, ``iat`` and ``exp``"""

    def __init__(self, secret_key: str, token_ttl_hours: int = 24, db_session=None):
        super().__init__(db_session)
        if not secret_key:
            raise ValueError("JWT secret key is required")
        self.secret_key = secret_key
        self.token_ttl = timedelta(hours=token_ttl_hours)
        self.user_repository = UserRepository(self.db_session)

    @handle_service_exceptions(logger)
    def register(self, email, password) -> User:
        """
        Create a user account

        Raises:
            ValidationError: missing email, password shorter than 6 characters
            EmailAlreadyRegisteredError: the email is taken
        """
        email = self._clean_email(email)
        if not isinstance(password, str) or not password:
            raise ValidationError("password is required")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"password must be at least {MIN_PASSWORD_LENGTH} characters")

        if self.user_repository.get_by_email(email) is not None:
            raise EmailAlreadyRegisteredError("email already registered")

        with self.unit_of_work("register user"):
            user = self.user_repository.create(
                email=email,
                password_hash=generate_password_hash(password)
            )

        logger.info(f"Registered user {user.id}")
        return user

    @handle_service_exceptions(logger)
    def login(self, email, password) -> tuple[str, User]:
        """Check credentials; returns ``(token, user)``"""
        email = self._clean_email(email)
        if not isinstance(password, str) or not password:
            raise ValidationError("password is required")

        user = self.user_repository.get_by_email(email)
        if user is None or not check_password_hash(user.password_hash, password):
            logger.warning(f"Failed login attempt for {email}")
            raise AuthenticationError(INVALID_CREDENTIALS)

        return self.generate_token(user.id), user

    def generate_token(self, user_id) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            'user_id': str(user_id),
            'iat': now,
            'exp': now + self.token_ttl,
        }
        return jwt.encode(claims, self.secret_key, algorithm=TOKEN_ALGORITHM)

    def validate_token(self, token: str):
        """Return the user id carried by a token; AuthenticationError when invalid or expired"""
        try:
            claims = jwt.decode(
                token,
                self.secret_key,
                algorithms=[TOKEN_ALGORITHM],
                options={'require': ['exp', 'iat']}
            )
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationError("token has expired") from e
        except jwt.InvalidTokenError as e:
            raise AuthenticationError("invalid token") from e

        try:
            return as_uuid(claims['user_id'])
        except (KeyError, ValueError) as e:
            raise AuthenticationError("invalid token claims") from e

    @handle_service_exceptions(logger)
    def authenticate(self, token: str) -> User:
        """The user a bearer token belongs to; tokens of deleted users are rejected"""
        user_id = self.validate_token(token)
        user = self.user_repository.get_by_id(user_id)
        if user is None:
            logger.warning(f"Rejected token for missing user {user_id}")
            raise AuthenticationError("user no longer exists")
        return user

    @handle_service_exceptions(logger)
    def get_user(self, user_id) -> User:
        user = self.user_repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(f"User not found: {user_id}")
        return user

    @staticmethod
    def _clean_email(email) -> str:
        if not isinstance(email, str) or not email.strip():
            raise ValidationError("email is required")
        return email.strip()
