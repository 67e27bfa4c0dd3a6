"""
Serializers for notification endpoints.
"""
from rest_framework import serializers

from apps.notifications.models import Notification, NotificationType


class NotificationSerializer(serializers.ModelSerializer):
    user_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Notification
        fields = ['id', 'user_id', 'message', 'type', 'is_read', 'created_at', 'updated_at']
        read_only_fields = fields


class NotificationCreateSerializer(serializers.Serializer):
    user_id = serializers.UUIDField(required=True)
    message = serializers.CharField(required=True)
    type = serializers.ChoiceField(choices=NotificationType.choices, required=False)
