"""
Core middleware for request processing.
"""
import uuid
import logging
import threading
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)

_local = threading.local()


def get_current_request_id():
    return getattr(_local, 'request_id', None)


class RequestIDMiddleware(MiddlewareMixin):
    """
    Inject a unique request_id into each request for tracing.
    The request_id is added to the request object, to log records and to
    the X-Request-ID response header.
    """

    def process_request(self, request):
        request_id = request.META.get('HTTP_X_REQUEST_ID') or str(uuid.uuid4())
        request.request_id = request_id
        _local.request_id = request_id

    def process_response(self, request, response):
        if hasattr(request, 'request_id'):
            response['X-Request-ID'] = request.request_id
        _local.request_id = None
        return response


class LoggingFilter(logging.Filter):
    """
    Add the current request_id to log records.
    """

    def filter(self, record):
        if not getattr(record, 'request_id', None):
            record.request_id = get_current_request_id()
        return True
