"""
Serializers for authentication and user management endpoints.
"""
from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password

from apps.rbac.models import User, Role


class UserSummarySerializer(serializers.ModelSerializer):
    """Compact user representation used when expanding recorded_by / vet."""

    class Meta:
        model = User
        fields = ['id', 'name', 'email', 'role']
        read_only_fields = fields


class UserProfileSerializer(serializers.ModelSerializer):
    """Full user representation (never includes the password hash)."""

    class Meta:
        model = User
        fields = [
            'id', 'name', 'email', 'role', 'phone', 'is_active',
            'last_login_at', 'created_at', 'updated_at'
        ]
        read_only_fields = fields


class PasswordField(serializers.CharField):
    def __init__(self, **kwargs):
        kwargs.setdefault('write_only', True)
        kwargs.setdefault('style', {'input_type': 'password'})
        super().__init__(**kwargs)


class RegistrationSerializer(serializers.Serializer):
    """Serializer for self-registration. The role is not accepted."""

    name = serializers.CharField(required=True, max_length=150)
    email = serializers.EmailField(required=True)
    password = PasswordField(required=True)
    phone = serializers.CharField(required=False, allow_blank=True, max_length=32)

    def validate_email(self, value):
        return value.strip().lower()

    def validate_password(self, value):
        validate_password(value)
        return value

    def validate_name(self, value):
        if not value.strip():
            raise serializers.ValidationError("Name cannot be empty.")
        return value.strip()


class LoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = PasswordField(required=True)


class UserProfileUpdateSerializer(serializers.Serializer):
    """Fields a user may change on their own profile."""

    name = serializers.CharField(required=False, max_length=150)
    phone = serializers.CharField(required=False, allow_blank=True, max_length=32)
    password = PasswordField(required=False)

    def validate_password(self, value):
        validate_password(value)
        return value


class UserCreateSerializer(serializers.Serializer):
    """Admin creation of a user with any role."""

    name = serializers.CharField(required=True, max_length=150)
    email = serializers.EmailField(required=True)
    password = PasswordField(required=True)
    role = serializers.ChoiceField(choices=Role.choices, default=Role.WORKER)
    phone = serializers.CharField(required=False, allow_blank=True, max_length=32)
    is_active = serializers.BooleanField(required=False, default=True)

    def validate_password(self, value):
        validate_password(value)
        return value


class UserUpdateSerializer(serializers.Serializer):
    """
    Partial user update.

    ``role`` and ``is_active`` are accepted here; the service rejects them
    unless the caller is an Admin.
    """

    name = serializers.CharField(required=False, max_length=150)
    email = serializers.EmailField(required=False)
    phone = serializers.CharField(required=False, allow_blank=True, max_length=32)
    role = serializers.ChoiceField(choices=Role.choices, required=False)
    is_active = serializers.BooleanField(required=False)
    password = PasswordField(required=False)

    def validate_password(self, value):
        validate_password(value)
        return value


class UserFilterSerializer(serializers.Serializer):
    role = serializers.ChoiceField(choices=Role.choices, required=False)
