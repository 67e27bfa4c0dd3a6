"""
Notification API views.

POST   /v1/notifications/                       - send (Admin, Manager)
GET    /v1/notifications/user/{user_id}         - newest 50 plus unread count
PUT    /v1/notifications/user/{user_id}/read-all
PUT    /v1/notifications/{id}/read
DELETE /v1/notifications/{id}

Everything except sending is limited to the owner or an Admin.
"""
from rest_framework import status
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema
from drf_spectacular.types import OpenApiTypes

from apps.core.responses import envelope
from apps.core.serializers import validate_input
from apps.notifications.services import NotificationService
from apps.notifications.serializers import NotificationSerializer, NotificationCreateSerializer


class NotificationCreateView(APIView):

    @extend_schema(
        tags=['Notifications'],
        summary='Send notification',
        description='Roles: Admin, Manager',
        request=NotificationCreateSerializer,
        responses={201: NotificationSerializer, 403: OpenApiTypes.OBJECT, 404: OpenApiTypes.OBJECT},
    )
    def post(self, request):
        data = validate_input(NotificationCreateSerializer, request.data)
        notification = NotificationService.send(
            request.auth,
            user_id=data['user_id'],
            message=data['message'],
            type=data.get('type'),
        )
        return envelope(
            data=NotificationSerializer(notification).data,
            message='Notification created successfully',
            status=status.HTTP_201_CREATED,
        )


class UserNotificationsView(APIView):

    @extend_schema(
        tags=['Notifications'],
        summary='List notifications of a user',
        responses={200: NotificationSerializer(many=True), 403: OpenApiTypes.OBJECT},
    )
    def get(self, request, user_id):
        notifications, unread = NotificationService.for_user(request.auth, user_id)
        data = NotificationSerializer(notifications, many=True).data
        return envelope(data=data, count=len(data), unread_count=unread)


class MarkAllReadView(APIView):

    @extend_schema(tags=['Notifications'], summary='Mark all notifications read', request=None)
    def put(self, request, user_id):
        NotificationService.mark_all_read(request.auth, user_id)
        return envelope(message='All notifications marked as read')


class MarkReadView(APIView):

    @extend_schema(
        tags=['Notifications'],
        summary='Mark notification read',
        request=None,
        responses={200: NotificationSerializer},
    )
    def put(self, request, pk):
        notification = NotificationService.mark_read(request.auth, pk)
        return envelope(
            data=NotificationSerializer(notification).data,
            message='Notification marked as read',
        )


class NotificationDetailView(APIView):

    @extend_schema(tags=['Notifications'], summary='Delete notification')
    def delete(self, request, pk):
        NotificationService.delete(request.auth, pk)
        return envelope(message='Notification deleted successfully')
