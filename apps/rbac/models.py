"""
User model for the farm API.

A user has exactly one role. The role decides which pages the UI shows and
which record mutations the server accepts (see ``apps.rbac.policy``).
"""
import logging
from django.db import models
from django.contrib.auth.hashers import make_password, check_password
from django.utils import timezone

from apps.core.models import BaseModel
from apps.rbac import policy

logger = logging.getLogger(__name__)


class Role(models.TextChoices):
    ADMIN = policy.ADMIN, 'Admin'
    MANAGER = policy.MANAGER, 'Manager'
    WORKER = policy.WORKER, 'Worker'
    VETERINARIAN = policy.VETERINARIAN, 'Veterinarian'


class UserManager(models.Manager):
    """
    Manager for User queries.

    Compatible with Django's authentication system and admin interface.
    """

    def active(self):
        """Return only active users."""
        return self.filter(is_active=True)

    def create_user(self, email, password=None, **extra_fields):
        """
        Create a new user with hashed password.

        This method is compatible with Django's authentication system.
        """
        if not email:
            raise ValueError('Email address is required')

        email = self.normalize_email(email)
        extra_fields.setdefault('is_active', True)
        extra_fields.setdefault('is_superuser', False)
        extra_fields.setdefault('role', Role.WORKER)

        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        """
        Create an Admin with Django admin access.

        This method is required for Django's createsuperuser command.
        """
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('role', Role.ADMIN)
        extra_fields.setdefault('name', email.split('@')[0])

        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(email, password, **extra_fields)

    @staticmethod
    def normalize_email(email):
        """Emails are unique case-insensitively; store them lower case."""
        return (email or '').strip().lower()

    def get_by_natural_key(self, email):
        """
        Get user by natural key (email).

        This method is required for Django's authentication system.
        """
        return self.get(**{self.model.USERNAME_FIELD: self.normalize_email(email)})


class User(BaseModel):
    """
    Farm user account.

    This is the AUTH_USER_MODEL for the entire application, including Django admin.
    """

    name = models.CharField(
        max_length=150,
        help_text="Display name"
    )
    email = models.EmailField(
        unique=True,
        help_text="User email address (unique, stored lower case)"
    )
    password_hash = models.CharField(
        max_length=255,
        help_text="Hashed password",
        db_column='password_hash'
    )
    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.WORKER,
        db_index=True,
        help_text="Role deciding page access and record grants"
    )
    phone = models.CharField(
        max_length=32,
        blank=True,
        default='',
        help_text="Contact phone number"
    )

    # Status
    is_active = models.BooleanField(
        default=True,
        db_index=True,
        help_text="Whether user account is active"
    )
    is_superuser = models.BooleanField(
        default=False,
        help_text="Django admin access"
    )

    # Activity Tracking
    last_login_at = models.DateTimeField(
        null=True,
        blank=True,
        help_text="Last login timestamp"
    )

    # Django admin compatibility
    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = []

    objects = UserManager()

    class Meta:
        db_table = 'users'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['is_active', 'created_at'], name='users_active_created_idx'),
        ]

    def __str__(self):
        return f"{self.name} <{self.email}>"

    @property
    def password(self):
        """
        Alias for password_hash to maintain Django admin compatibility.
        """
        return self.password_hash

    @password.setter
    def password(self, value):
        self.password_hash = value

    def check_password(self, raw_password):
        """Check if provided password matches stored hash."""
        return check_password(raw_password, self.password_hash)

    def set_password(self, raw_password):
        """Set user password (hashes automatically)."""
        self.password_hash = make_password(raw_password)

    def get_username(self):
        return self.email

    def get_full_name(self):
        return self.name or self.email

    def update_last_login(self):
        """Update last_login_at to current time."""
        self.last_login_at = timezone.now()
        self.save(update_fields=['last_login_at'])

    @property
    def is_admin(self):
        return self.role == Role.ADMIN

    @property
    def is_authenticated(self):
        """Always True for stored users (Django authentication compatibility)."""
        return True

    @property
    def is_anonymous(self):
        """Always False for stored users (Django authentication compatibility)."""
        return False

    @property
    def is_staff(self):
        """Django admin access follows is_superuser."""
        return self.is_superuser

    def has_perm(self, perm, obj=None):
        return self.is_superuser

    def has_perms(self, perm_list, obj=None):
        return self.is_superuser

    def has_module_perms(self, app_label):
        return self.is_superuser

    def natural_key(self):
        return (self.email,)
