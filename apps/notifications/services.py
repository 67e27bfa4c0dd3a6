"""
Notification service.

A notification belongs to one user. Only its owner or an Admin may read,
mark or delete it; Admins and Managers may send new ones.
"""
import logging
from django.db import transaction

from apps.core.exceptions import Forbidden, NotFound
from apps.notifications.models import Notification
from apps.rbac.models import User
from apps.rbac.policy import POLICY

logger = logging.getLogger(__name__)

# Newest notifications returned per user listing
LIST_LIMIT = 50


class NotificationService:

    @staticmethod
    def _check_owner(principal, user_id, message):
        if not principal.is_admin and str(principal.id) != str(user_id):
            raise Forbidden(message)

    @classmethod
    def get_notification(cls, notification_id):
        try:
            return Notification.objects.get(pk=notification_id)
        except Notification.DoesNotExist:
            raise NotFound('Notification not found')

    @classmethod
    @transaction.atomic
    def send(cls, principal, user_id, message, type=None):
        """
        Store a notification for ``user_id``.

        Raises:
            Forbidden: caller's role may not send notifications
            NotFound: unknown recipient
        """
        if not POLICY.can_send_notifications(principal.role):
            raise Forbidden(f"User role {principal.role} is not authorized to send notifications")

        if not User.objects.filter(pk=user_id).exists():
            raise NotFound('User not found')

        values = {'user_id': user_id, 'message': message}
        if type:
            values['type'] = type
        notification = Notification.objects.create(**values)

        logger.info(
            "Notification created",
            extra={
                'notification_id': str(notification.id),
                'recipient_id': str(user_id),
                'sender_id': str(principal.id),
            }
        )
        return notification

    @classmethod
    def for_user(cls, principal, user_id):
        """
        Newest notifications of a user and their unread count.

        Returns:
            tuple: (list of at most LIST_LIMIT notifications, unread count)
        """
        cls._check_owner(principal, user_id, 'Not authorized to view these notifications')
        notifications = Notification.objects.filter(user_id=user_id).order_by('-created_at')
        unread = notifications.filter(is_read=False).count()
        return list(notifications[:LIST_LIMIT]), unread

    @classmethod
    def mark_read(cls, principal, notification_id):
        notification = cls.get_notification(notification_id)
        cls._check_owner(principal, notification.user_id, 'Not authorized to update this notification')

        if not notification.is_read:
            notification.is_read = True
            notification.save(update_fields=['is_read', 'updated_at'])
        return notification

    @classmethod
    def mark_all_read(cls, principal, user_id):
        cls._check_owner(principal, user_id, 'Not authorized to update these notifications')
        updated = Notification.objects.filter(user_id=user_id, is_read=False).update(is_read=True)

        logger.info(
            "Notifications marked read",
            extra={'user_id': str(user_id), 'count': updated}
        )
        return updated

    @classmethod
    def delete(cls, principal, notification_id):
        notification = cls.get_notification(notification_id)
        cls._check_owner(principal, notification.user_id, 'Not authorized to delete this notification')
        notification.delete()
