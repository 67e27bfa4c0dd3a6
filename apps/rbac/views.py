"""
User management API views.

GET    /v1/users/        - list users (users route: Admin)
POST   /v1/users/        - create a user with any role (Admin)
GET    /v1/users/{id}    - Admin or the user themself
PUT    /v1/users/{id}    - Admin, or the user themself without role changes
DELETE /v1/users/{id}    - Admin, never their own account
"""
import logging
from rest_framework import status
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated
from drf_spectacular.utils import extend_schema, OpenApiParameter
from drf_spectacular.types import OpenApiTypes

from apps.core.permissions import HasRouteAccess, requires_route
from apps.core.responses import envelope
from apps.core.serializers import validate_input
from apps.rbac.services import UserService
from apps.rbac.serializers import (
    UserProfileSerializer, UserCreateSerializer, UserUpdateSerializer, UserFilterSerializer,
)

logger = logging.getLogger(__name__)


@requires_route('users')
class UserListView(APIView):
    permission_classes = [IsAuthenticated, HasRouteAccess]

    @extend_schema(
        tags=['Users'],
        summary='List users',
        parameters=[
            OpenApiParameter(
                name='role',
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description='Filter by role',
                enum=['Admin', 'Manager', 'Worker', 'Veterinarian']
            ),
        ],
        responses={200: UserProfileSerializer(many=True), 403: OpenApiTypes.OBJECT},
    )
    def get(self, request):
        filters = validate_input(UserFilterSerializer, request.query_params)
        users = UserService.list_users(role=filters.get('role'))
        data = UserProfileSerializer(users, many=True).data
        return envelope(data=data, count=len(data))

    @extend_schema(
        tags=['Users'],
        summary='Create user',
        request=UserCreateSerializer,
        responses={201: UserProfileSerializer, 400: OpenApiTypes.OBJECT, 403: OpenApiTypes.OBJECT},
    )
    def post(self, request):
        data = validate_input(UserCreateSerializer, request.data)
        user = UserService.create_user(data)
        return envelope(
            data=UserProfileSerializer(user).data,
            message='User created successfully',
            status=status.HTTP_201_CREATED,
        )


class UserDetailView(APIView):
    """Ownership rules live in UserService so they apply to every caller."""

    @extend_schema(
        tags=['Users'],
        summary='Get user',
        responses={200: UserProfileSerializer, 403: OpenApiTypes.OBJECT, 404: OpenApiTypes.OBJECT},
    )
    def get(self, request, user_id):
        user = UserService.get_for(request.auth, user_id)
        return envelope(data=UserProfileSerializer(user).data)

    @extend_schema(
        tags=['Users'],
        summary='Update user',
        request=UserUpdateSerializer,
        responses={200: UserProfileSerializer, 400: OpenApiTypes.OBJECT, 403: OpenApiTypes.OBJECT},
    )
    def put(self, request, user_id):
        data = validate_input(UserUpdateSerializer, request.data, partial=True)
        user = UserService.update_user(request.auth, user_id, data, acting_user=request.user)
        return envelope(
            data=UserProfileSerializer(user).data,
            message='User updated successfully',
        )

    @extend_schema(
        tags=['Users'],
        summary='Delete user',
        responses={200: OpenApiTypes.OBJECT, 403: OpenApiTypes.OBJECT, 404: OpenApiTypes.OBJECT},
    )
    def delete(self, request, user_id):
        UserService.delete_user(request.auth, user_id)
        return envelope(message='User deleted successfully')
