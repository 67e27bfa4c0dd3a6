"""
Error taxonomy and the DRF exception handler.

Every error leaves the API in the same envelope::

    {"success": false, "message": "...", "errors": {...}}
"""
import logging
from django.conf import settings
from django.db import DatabaseError
from django.db.models import ProtectedError
from django.http import Http404
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler
from django_ratelimit.exceptions import Ratelimited

logger = logging.getLogger(__name__)


class FarmException(Exception):
    """Base exception for farm API errors."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = 'Server error'

    def __init__(self, message=None, details=None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(FarmException):
    """Raised when input is missing a required field or violates a bound."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Validation failed'


class ConflictError(FarmException):
    """Raised when a uniqueness rule is violated (e.g. duplicate email)."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Resource already exists'


class Unauthenticated(FarmException):
    """Raised for a missing, malformed, badly signed or expired token."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = 'Not authorized, token failed'


class Forbidden(FarmException):
    """Raised when the caller's role lacks the grant for the action."""
    status_code = status.HTTP_403_FORBIDDEN
    default_message = 'You do not have permission to perform this action'


class NotFound(FarmException):
    """Raised when an id does not resolve to a record."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'Resource not found'


class ConfigError(FarmException):
    """Raised when required configuration (e.g. the JWT secret) is absent."""
    default_message = 'Server is not configured correctly'


class InternalError(FarmException):
    """Storage failure. The handler maps uncaught DatabaseError onto it."""
    default_message = 'Server error'


def _retry_after(path):
    if '/auth/register' in path:
        return 3600
    return 60


def _error_body(message, errors=None, request_id=None):
    body = {'success': False, 'message': message}
    if errors:
        body['errors'] = errors
    if request_id:
        body['request_id'] = request_id
    return body


def _drf_message(exc):
    detail = exc.detail
    if isinstance(detail, (list, tuple)) and detail:
        return str(detail[0])
    if isinstance(detail, dict):
        return 'Validation failed'
    return str(detail)


def custom_exception_handler(exc, context):
    """
    Map every exception raised inside a DRF view onto the error envelope.

    Unknown exceptions are logged with the request id and answered with a
    generic 500; the exception text is only exposed when DEBUG is on.
    """
    request = context.get('request')
    request_id = getattr(request, 'request_id', None) if request else None
    log_extra = {
        'request_id': request_id,
        'path': request.path if request else None,
        'method': request.method if request else None,
    }

    if isinstance(exc, Ratelimited):
        from apps.core.logging import SecurityLogger

        ip_address = request.META.get('REMOTE_ADDR', 'unknown') if request else 'unknown'
        email = None
        if request is not None and isinstance(getattr(request, 'data', None), dict):
            email = request.data.get('email')
        path = request.path if request else ''
        retry_after = _retry_after(path)

        SecurityLogger.log_rate_limit_exceeded(
            endpoint=path or 'unknown',
            ip_address=ip_address,
            user_email=email,
            limit='Rate limit exceeded',
        )

        response = Response(
            _error_body('Rate limit exceeded. Please try again later.', request_id=request_id),
            status=status.HTTP_429_TOO_MANY_REQUESTS,
        )
        response['Retry-After'] = str(retry_after)
        return response

    if isinstance(exc, DatabaseError) and not isinstance(exc, ProtectedError):
        exc = InternalError(str(exc))

    if isinstance(exc, FarmException):
        if exc.status_code >= 500:
            logger.error(
                f"API Exception: {exc.__class__.__name__}",
                extra={**log_extra, 'exception': str(exc)},
                exc_info=True,
            )
            message = exc.message if settings.DEBUG else exc.default_message
            return Response(_error_body(message, request_id=request_id), status=exc.status_code)

        logger.info(
            f"API Exception: {exc.__class__.__name__}",
            extra={**log_extra, 'exception': exc.message},
        )
        return Response(
            _error_body(exc.message, errors=exc.details, request_id=request_id),
            status=exc.status_code,
        )

    if isinstance(exc, ProtectedError):
        return Response(
            _error_body('Record is referenced by other records and cannot be deleted', request_id=request_id),
            status=status.HTTP_400_BAD_REQUEST,
        )

    # Call DRF's default exception handler for its own exception types
    response = exception_handler(exc, context)

    if response is None:
        logger.error(
            f"API Exception: {exc.__class__.__name__}",
            extra={**log_extra, 'exception': str(exc)},
            exc_info=True,
        )
        return Response(
            _error_body(str(exc) if settings.DEBUG else 'Server error', request_id=request_id),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, Http404):
        message = 'Resource not found'
    elif isinstance(exc, drf_exceptions.NotAuthenticated):
        message = 'Not authorized, no token'
    elif isinstance(exc, drf_exceptions.APIException):
        message = _drf_message(exc)
    else:
        message = 'Request failed'

    errors = None
    if isinstance(exc, drf_exceptions.ValidationError):
        errors = exc.detail if isinstance(exc.detail, dict) else {'non_field_errors': exc.detail}
        message = 'Validation failed'

    logger.info(
        f"API Exception: {exc.__class__.__name__}",
        extra={**log_extra, 'status_code': response.status_code},
    )

    response.data = _error_body(message, errors=errors, request_id=request_id)
    return response
