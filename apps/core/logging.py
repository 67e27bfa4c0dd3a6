"""
Custom logging formatters for structured JSON logging.
"""
import json
import logging
import re
import traceback
from datetime import datetime, timezone as dt_timezone
from django.utils import timezone
import sentry_sdk


class PIIMasker:
    """
    Utility class to mask sensitive PII data in logs.
    """

    # Patterns for sensitive data
    PHONE_PATTERN = re.compile(r'\+?\d{10,15}')
    EMAIL_PATTERN = re.compile(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b')
    SECRET_PATTERN = re.compile(r'(token|secret|password|auth)["\']?\s*[:=]\s*["\']?([^"\'\s,}]+)', re.IGNORECASE)

    # Field names whose values are never logged
    SENSITIVE_FIELDS = {
        'password', 'password_hash',
        'token', 'access_token', 'bearer_token',
        'secret', 'secret_key', 'jwt_secret_key',
        'authorization',
    }

    # Field names whose values are partially masked
    PII_FIELDS = {
        'phone', 'customer_phone',
        'email', 'user_email',
    }

    @classmethod
    def mask_phone(cls, text):
        """Mask phone numbers in text."""
        if not isinstance(text, str):
            return text
        return cls.PHONE_PATTERN.sub(lambda m: m.group(0)[:3] + '*' * (len(m.group(0)) - 3), text)

    @classmethod
    def mask_email(cls, text):
        """Mask email addresses in text, keeping the first letter and domain."""
        if not isinstance(text, str):
            return text

        def mask_email_match(match):
            username, _, domain = match.group(0).partition('@')
            if len(username) > 1:
                username = username[0] + '*' * (len(username) - 1)
            return f"{username}@{domain}"

        return cls.EMAIL_PATTERN.sub(mask_email_match, text)

    @classmethod
    def mask_secrets(cls, text):
        """Mask tokens, secrets and passwords in text."""
        if not isinstance(text, str):
            return text
        return cls.SECRET_PATTERN.sub(r'\1: ********', text)

    @classmethod
    def mask_text(cls, text):
        """Apply all masking patterns to text."""
        if not isinstance(text, str):
            return text
        text = cls.mask_secrets(text)
        text = cls.mask_email(text)
        text = cls.mask_phone(text)
        return text

    @classmethod
    def mask_dict(cls, data):
        """Recursively mask sensitive data in dictionaries."""
        if not isinstance(data, dict):
            return data

        masked = {}
        for key, value in data.items():
            lowered = key.lower()
            if lowered in cls.SENSITIVE_FIELDS:
                masked[key] = '********' if value else value
            elif lowered in cls.PII_FIELDS and isinstance(value, str):
                masked[key] = cls.mask_text(value)
            elif isinstance(value, dict):
                masked[key] = cls.mask_dict(value)
            elif isinstance(value, list):
                masked[key] = [
                    cls.mask_dict(item) if isinstance(item, dict) else cls.mask_text(item)
                    for item in value
                ]
            elif isinstance(value, str):
                masked[key] = cls.mask_text(value)
            else:
                masked[key] = value

        return masked


# LogRecord attributes that are not user supplied extras
_RESERVED_ATTRS = {
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs', 'message',
    'pathname', 'process', 'processName', 'relativeCreated',
    'thread', 'threadName', 'taskName', 'exc_info', 'exc_text', 'stack_info',
    'request_id',
}


class JSONFormatter(logging.Formatter):
    """
    Format log records as JSON for structured logging.
    Includes request_id from extra fields if available.
    Automatically masks sensitive PII data.
    """

    def format(self, record):
        log_data = {
            'timestamp': datetime.now(dt_timezone.utc).isoformat().replace('+00:00', 'Z'),
            'level': record.levelname,
            'logger': record.name,
            'message': PIIMasker.mask_text(record.getMessage()),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if getattr(record, 'request_id', None):
            log_data['request_id'] = record.request_id

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': PIIMasker.mask_text(str(record.exc_info[1])),
                'traceback': [PIIMasker.mask_text(line) for line in traceback.format_exception(*record.exc_info)],
            }

        extras = {
            key: value for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and not key.startswith('_')
        }
        for key, value in PIIMasker.mask_dict(extras).items():
            try:
                json.dumps(value)
                log_data[key] = value
            except (TypeError, ValueError):
                log_data[key] = PIIMasker.mask_text(str(value))

        return json.dumps(log_data)


class SecurityLogger:
    """
    Centralized logging for security events.

    Events go to the ``security`` logger with structured data. Critical
    events are also sent to Sentry for alerting.
    """

    CRITICAL_EVENTS = {
        'privilege_escalation_attempt',
    }

    @staticmethod
    def log_event(event_type: str, level: str = 'warning', **context):
        """
        Log a security event with structured data.

        Args:
            event_type: Type of security event (e.g., 'failed_login')
            level: Log level ('info', 'warning', 'error', 'critical')
            **context: Additional context data (ip_address, user_email, role, etc.)

        Example:
            >>> SecurityLogger.log_event(
            ...     'permission_denied',
            ...     ip_address='192.168.1.1',
            ...     role='Worker',
            ...     resource='flocks'
            ... )
        """
        logger = logging.getLogger('security')

        log_data = {
            'event_type': event_type,
            'timestamp': timezone.now().isoformat(),
        }
        log_data.update(context)
        log_data = PIIMasker.mask_dict(log_data)

        log_method = getattr(logger, level, logger.warning)
        log_method(
            f"Security event: {event_type}",
            extra=log_data
        )

        if event_type in SecurityLogger.CRITICAL_EVENTS:
            sentry_sdk.capture_message(
                f"Critical security event: {event_type}",
                level='error',
            )

    @staticmethod
    def log_failed_login(email: str, ip_address: str, user_agent: str = None, reason: str = None):
        """Log a failed login attempt."""
        SecurityLogger.log_event(
            'failed_login',
            level='warning',
            user_email=email,
            ip_address=ip_address,
            user_agent=user_agent,
            reason=reason
        )

    @staticmethod
    def log_invalid_token(reason: str, ip_address: str = None):
        """Log a bearer token that failed verification."""
        SecurityLogger.log_event(
            'invalid_token',
            level='info',
            reason=reason,
            ip_address=ip_address,
        )

    @staticmethod
    def log_permission_denied(user, role: str, resource: str, action: str, ip_address: str):
        """
        Log a permission denial.

        Args:
            user: User instance (may be None)
            role: Role the decision was made for
            resource: Resource or route key
            action: Attempted action
            ip_address: IP address of the request
        """
        SecurityLogger.log_event(
            'permission_denied',
            level='warning',
            user_id=str(user.id) if getattr(user, 'id', None) else None,
            role=role,
            resource=resource,
            action=action,
            ip_address=ip_address
        )

    @staticmethod
    def log_rate_limit_exceeded(endpoint: str, ip_address: str, user_email: str = None, limit: str = None):
        """Log a rate limit violation."""
        SecurityLogger.log_event(
            'rate_limit_exceeded',
            level='warning',
            endpoint=endpoint,
            ip_address=ip_address,
            user_email=user_email,
            limit=limit
        )

    @staticmethod
    def log_privilege_escalation_attempt(user, attempted_role: str, target_user_id: str = None, ip_address: str = None):
        """
        Log a non-Admin user trying to change a role.

        Sent to Sentry as a critical event.
        """
        SecurityLogger.log_event(
            'privilege_escalation_attempt',
            level='error',
            user_id=str(user.id) if getattr(user, 'id', None) else None,
            role=getattr(user, 'role', None),
            attempted_role=attempted_role,
            target_user_id=target_user_id,
            ip_address=ip_address,
        )
