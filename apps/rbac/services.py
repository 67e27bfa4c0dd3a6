"""
Authentication and user management services.

Implements:
- AuthService: JWT issue/verify, registration, login
- UserService: Admin user management with role-change rules
"""
import logging
from dataclasses import dataclass, replace
from typing import Optional, Dict, Any
from datetime import datetime, timedelta, timezone as dt_timezone
from django.conf import settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import IntegrityError, transaction
import jwt

from apps.core.exceptions import (
    ConfigError, ConflictError, Forbidden, NotFound, Unauthenticated, ValidationError,
)
from apps.rbac import policy
from apps.rbac.models import User, Role

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Principal:
    """The authenticated caller as seen by permission checks."""

    id: Any
    role: str

    def with_role(self, role: str) -> 'Principal':
        return replace(self, role=role)

    @property
    def is_admin(self) -> bool:
        return self.role == policy.ADMIN


class AuthService:
    """
    Service for authentication operations: JWT, registration, login.
    """

    @classmethod
    def _secret(cls) -> str:
        secret = getattr(settings, 'JWT_SECRET_KEY', None)
        if not secret:
            raise ConfigError('JWT_SECRET_KEY is not configured')
        return secret

    @classmethod
    def issue_token(cls, user_id, role: str, expires_in: Optional[timedelta] = None) -> str:
        """
        Issue a signed JWT for a user.

        Args:
            user_id: User primary key
            role: Role at issue time
            expires_in: Token lifetime (default JWT_EXPIRATION_HOURS)

        Returns:
            JWT token string

        Raises:
            ConfigError: if JWT_SECRET_KEY is not set
        """
        secret = cls._secret()
        if expires_in is None:
            expires_in = timedelta(hours=getattr(settings, 'JWT_EXPIRATION_HOURS', 24 * 7))

        now = datetime.now(dt_timezone.utc)
        payload = {
            'user_id': str(user_id),
            'role': role,
            'exp': now + expires_in,
            'iat': now,
        }

        return jwt.encode(
            payload,
            secret,
            algorithm=getattr(settings, 'JWT_ALGORITHM', 'HS256')
        )

    @classmethod
    def verify_token(cls, token: str) -> Principal:
        """
        Verify a JWT and return the principal it names.

        Raises:
            Unauthenticated: missing, malformed, badly signed or expired token
            ConfigError: if JWT_SECRET_KEY is not set
        """
        from apps.core.logging import SecurityLogger

        if not token:
            raise Unauthenticated('Not authorized, no token')

        secret = cls._secret()
        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[getattr(settings, 'JWT_ALGORITHM', 'HS256')],
                options={'require': ['exp', 'iat', 'user_id', 'role']},
            )
        except jwt.ExpiredSignatureError:
            SecurityLogger.log_invalid_token(reason='expired')
            raise Unauthenticated('Not authorized, token expired')
        except jwt.InvalidTokenError as e:
            SecurityLogger.log_invalid_token(reason=e.__class__.__name__)
            raise Unauthenticated('Not authorized, token failed')

        if payload['role'] not in policy.ROLES:
            SecurityLogger.log_invalid_token(reason='unknown_role')
            raise Unauthenticated('Not authorized, token failed')

        return Principal(id=payload['user_id'], role=payload['role'])

    @classmethod
    def resolve_user(cls, principal: Principal) -> User:
        """
        Load the stored user a principal refers to.

        Raises:
            Unauthenticated: if the user no longer exists or is inactive
        """
        try:
            return User.objects.active().get(pk=principal.id)
        except (User.DoesNotExist, ValueError, DjangoValidationError):
            raise Unauthenticated('Not authorized, user not found')

    @classmethod
    def token_for(cls, user: User) -> str:
        return cls.issue_token(user.id, user.role)

    @classmethod
    @transaction.atomic
    def register_user(cls, name: str, email: str, password: str, phone: str = '') -> Dict[str, Any]:
        """
        Register a new Worker account.

        The role of a self-registered account is always Worker; only an
        Admin can change it afterwards.

        Returns:
            Dict with user and token

        Raises:
            ConflictError: if the email is already registered
        """
        email = User.objects.normalize_email(email)
        if User.objects.filter(email=email).exists():
            raise ConflictError('User already exists with this email')

        try:
            user = User.objects.create_user(
                email=email,
                password=password,
                name=name,
                phone=phone or '',
                role=Role.WORKER,
            )
        except IntegrityError:
            raise ConflictError('User already exists with this email')

        logger.info(
            "User registered",
            extra={'user_id': str(user.id), 'role': user.role}
        )

        return {
            'user': user,
            'token': cls.token_for(user),
        }

    @classmethod
    def login(cls, email: str, password: str) -> Optional[Dict[str, Any]]:
        """
        Authenticate user and return JWT token.

        Returns:
            Dict with user and token, or None if authentication failed
        """
        try:
            user = User.objects.active().get(email=User.objects.normalize_email(email))
        except User.DoesNotExist:
            # Run the hasher once to reduce timing difference for unknown emails
            User().set_password(password)
            return None

        if not user.check_password(password):
            return None

        token = cls.token_for(user)
        user.update_last_login()

        logger.info(
            "User logged in",
            extra={'user_id': str(user.id), 'role': user.role}
        )

        return {
            'user': user,
            'token': token,
        }


class UserService:
    """
    User management.

    Only an Admin lists, creates or deletes users and changes roles. Any
    user may read and edit their own profile fields.
    """

    @staticmethod
    def list_users(role: Optional[str] = None):
        users = User.objects.all().order_by('-created_at')
        if role:
            users = users.filter(role=role)
        return users

    @staticmethod
    def get_user(user_id) -> User:
        try:
            return User.objects.get(pk=user_id)
        except User.DoesNotExist:
            raise NotFound('User not found')

    @classmethod
    def _check_self_or_admin(cls, principal: Principal, user_id):
        if not principal.is_admin and str(principal.id) != str(user_id):
            raise Forbidden('Not authorized to access this user')

    @classmethod
    def get_for(cls, principal: Principal, user_id) -> User:
        cls._check_self_or_admin(principal, user_id)
        return cls.get_user(user_id)

    @classmethod
    @transaction.atomic
    def create_user(cls, data: Dict[str, Any]) -> User:
        email = User.objects.normalize_email(data['email'])
        if User.objects.filter(email=email).exists():
            raise ConflictError('User already exists with this email')

        values = dict(data)
        values.pop('email')
        password = values.pop('password')
        user = User.objects.create_user(email=email, password=password, **values)

        logger.info(
            "User created",
            extra={'user_id': str(user.id), 'role': user.role}
        )
        return user

    @classmethod
    @transaction.atomic
    def update_user(cls, principal: Principal, user_id, data: Dict[str, Any], acting_user=None) -> User:
        """
        Apply a partial update to a user.

        Raises:
            Forbidden: non-Admin editing someone else, or changing a role
            NotFound: unknown user id
            ConflictError: email already taken
        """
        from apps.core.logging import SecurityLogger

        cls._check_self_or_admin(principal, user_id)
        user = cls.get_user(user_id)

        if 'role' in data and data['role'] != user.role and not principal.is_admin:
            SecurityLogger.log_privilege_escalation_attempt(
                user=acting_user,
                attempted_role=data['role'],
                target_user_id=str(user_id),
            )
            raise Forbidden('Only an Admin can change roles')

        if 'is_active' in data and not principal.is_admin:
            raise Forbidden('Only an Admin can activate or deactivate users')

        if 'email' in data:
            email = User.objects.normalize_email(data['email'])
            if User.objects.filter(email=email).exclude(pk=user.pk).exists():
                raise ConflictError('User already exists with this email')
            data = {**data, 'email': email}

        data = dict(data)
        password = data.pop('password', None)
        for field, value in data.items():
            setattr(user, field, value)
        if password:
            user.set_password(password)
        user.save()

        logger.info(
            "User updated",
            extra={'user_id': str(user.id), 'fields': sorted(data.keys())}
        )
        return user

    @classmethod
    def delete_user(cls, principal: Principal, user_id):
        if not principal.is_admin:
            raise Forbidden('Only an Admin can delete users')
        if str(principal.id) == str(user_id):
            raise ValidationError('You cannot delete your own account')

        user = cls.get_user(user_id)
        user.delete()

        logger.info("User deleted", extra={'user_id': str(user_id)})
