"""
Success envelope shared by every endpoint.
"""
from rest_framework import status as http_status
from rest_framework.response import Response


def envelope(data=None, message=None, count=None, status=http_status.HTTP_200_OK, **extra):
    """
    Build ``{success, message?, count?, data?}`` plus any extra keys.

    ``count`` is set by list endpoints; ``extra`` carries auxiliary totals
    such as ``unread_count``.
    """
    body = {'success': True}
    if message is not None:
        body['message'] = message
    if count is not None:
        body['count'] = count
    body.update(extra)
    if data is not None:
        body['data'] = data
    return Response(body, status=status)
