"""
Authentication REST API views.

Implements endpoints for:
- User registration
- Login
- User profile management
- The RBAC policy document used by the UI
"""
import json
import logging
from rest_framework import status
from rest_framework.views import APIView
from django_ratelimit.decorators import ratelimit
from django_ratelimit.exceptions import Ratelimited
from django.utils.decorators import method_decorator
from drf_spectacular.utils import extend_schema, OpenApiExample
from drf_spectacular.types import OpenApiTypes

from apps.core.exceptions import Unauthenticated
from apps.core.responses import envelope
from apps.core.serializers import validate_input
from apps.rbac.policy import POLICY
from apps.rbac.services import AuthService, UserService
from apps.rbac.serializers import (
    RegistrationSerializer, LoginSerializer,
    UserProfileSerializer, UserProfileUpdateSerializer,
)

logger = logging.getLogger(__name__)


def login_email_key(group, request):
    """
    Rate-limit key for login attempts per email address.

    Login bodies are JSON, so ``post:email`` would always be empty.
    """
    try:
        body = json.loads(request.body or b'{}')
    except (ValueError, UnicodeDecodeError):
        return ''
    email = body.get('email') if isinstance(body, dict) else None
    return str(email or '').strip().lower()


def _auth_payload(user, token):
    return {
        'user': UserProfileSerializer(user).data,
        'token': token,
    }


@extend_schema(
    tags=['Authentication'],
    summary='Register new user',
    description='''
Register a new user account.

Self-registered accounts always get the **Worker** role; an Admin can change
the role afterwards through `PUT /v1/users/{id}`.

Returns a JWT for immediate use.

**No authentication required** - this is a public endpoint.

**Rate limit**: 3 requests/hour per IP
    ''',
    request=RegistrationSerializer,
    responses={
        201: OpenApiTypes.OBJECT,
        400: OpenApiTypes.OBJECT,
        429: OpenApiTypes.OBJECT,
    },
    examples=[
        OpenApiExample(
            'Registration Request',
            value={
                'name': 'Jane Wanjiku',
                'email': 'jane@example.com',
                'password': 'layers2024',
                'phone': '+254712345678',
            },
            request_only=True
        ),
        OpenApiExample(
            'Duplicate Email',
            value={
                'success': False,
                'message': 'User already exists with this email'
            },
            response_only=True,
            status_codes=['400']
        ),
    ]
)
@method_decorator(ratelimit(key='ip', rate='3/h', method='POST', block=False), name='dispatch')
class RegistrationView(APIView):
    """
    POST /v1/auth/register

    No authentication required.
    Rate limited to 3 requests per hour per IP.
    """
    authentication_classes = []
    permission_classes = []

    def post(self, request):
        if getattr(request, 'limited', False):
            raise Ratelimited()

        data = validate_input(RegistrationSerializer, request.data)
        result = AuthService.register_user(
            name=data['name'],
            email=data['email'],
            password=data['password'],
            phone=data.get('phone', ''),
        )

        return envelope(
            data=_auth_payload(result['user'], result['token']),
            message='User registered successfully',
            status=status.HTTP_201_CREATED,
        )


@extend_schema(
    tags=['Authentication'],
    summary='Login',
    description='''
Authenticate with email and password and receive a JWT.

**No authentication required** - this is a public endpoint.

**Rate limit**: 5 requests/minute per IP, 10 requests/hour per email
    ''',
    request=LoginSerializer,
    responses={
        200: OpenApiTypes.OBJECT,
        400: OpenApiTypes.OBJECT,
        401: OpenApiTypes.OBJECT,
        429: OpenApiTypes.OBJECT,
    },
    examples=[
        OpenApiExample(
            'Login Request',
            value={
                'email': 'manager@poultryfarm.com',
                'password': 'manager123'
            },
            request_only=True
        ),
        OpenApiExample(
            'Invalid Credentials',
            value={
                'success': False,
                'message': 'Invalid email or password'
            },
            response_only=True,
            status_codes=['401']
        ),
    ]
)
@method_decorator(ratelimit(key='ip', rate='5/m', method='POST', block=False), name='dispatch')
@method_decorator(ratelimit(key=login_email_key, rate='10/h', method='POST', block=False), name='dispatch')
class LoginView(APIView):
    """
    POST /v1/auth/login

    No authentication required.
    Rate limited to:
    - 5 requests per minute per IP address
    - 10 requests per hour per email address
    """
    authentication_classes = []
    permission_classes = []

    def post(self, request):
        from apps.core.logging import SecurityLogger

        if getattr(request, 'limited', False):
            raise Ratelimited()

        data = validate_input(LoginSerializer, request.data)
        result = AuthService.login(email=data['email'], password=data['password'])

        if not result:
            SecurityLogger.log_failed_login(
                email=data['email'],
                ip_address=request.META.get('REMOTE_ADDR', 'unknown'),
                user_agent=request.META.get('HTTP_USER_AGENT', 'unknown'),
                reason='Invalid credentials'
            )
            raise Unauthenticated('Invalid email or password')

        return envelope(
            data=_auth_payload(result['user'], result['token']),
            message='Login successful',
        )


@extend_schema(
    tags=['Authentication'],
    summary='Current user profile',
    description='''
`GET` returns the authenticated user. `PUT` updates name, phone or password.

Email and role cannot be changed here; an Admin changes roles through
`PUT /v1/users/{id}`.
    ''',
    request=UserProfileUpdateSerializer,
    responses={
        200: UserProfileSerializer,
        400: OpenApiTypes.OBJECT,
        401: OpenApiTypes.OBJECT,
    },
)
class UserProfileView(APIView):
    """
    GET /v1/auth/me
    PUT /v1/auth/me

    Requires JWT authentication.
    """

    def get(self, request):
        return envelope(data=UserProfileSerializer(request.user).data)

    def put(self, request):
        data = validate_input(UserProfileUpdateSerializer, request.data, partial=True)
        user = UserService.update_user(request.auth, request.user.id, data, acting_user=request.user)
        return envelope(
            data=UserProfileSerializer(user).data,
            message='Profile updated successfully',
        )


@extend_schema(
    tags=['Authentication'],
    summary='Permission tables',
    description='''
The RBAC policy document: route table, action table and version, plus the
caller's own effective routes and actions. The UI gates pages and buttons
from this response so it always matches what the server enforces.
    ''',
    responses={200: OpenApiTypes.OBJECT, 401: OpenApiTypes.OBJECT},
)
class PermissionsView(APIView):
    """
    GET /v1/auth/permissions
    """

    def get(self, request):
        role = request.auth.role
        return envelope(data={
            'role': role,
            'routes': POLICY.routes_for(role),
            'actions': POLICY.actions_for(role),
            'policy': POLICY.as_dict(),
        })
