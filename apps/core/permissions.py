"""
DRF permission classes and decorators for RBAC enforcement.

This module provides:
- HasResourcePermission: checks the role's action grant on mutating requests
- HasRouteAccess: checks the role's page access for route-gated endpoints
- @requires_route: Decorator to declare the page route a view belongs to
"""
import logging
from functools import wraps
from rest_framework.permissions import BasePermission, SAFE_METHODS

from apps.rbac.policy import CREATE, UPDATE, DELETE, can_perform, can_access_route

logger = logging.getLogger(__name__)


METHOD_ACTIONS = {
    'POST': CREATE,
    'PUT': UPDATE,
    'PATCH': UPDATE,
    'DELETE': DELETE,
}


def _role(request):
    principal = getattr(request, 'auth', None)
    return getattr(principal, 'role', None)


def _client_ip(request):
    return request.META.get('REMOTE_ADDR', 'unknown')


class HasResourcePermission(BasePermission):
    """
    Enforce ``can_perform(role, resource, action)`` on mutating requests.

    The view names its resource in ``rbac_resource``. Safe methods only
    require authentication; POST maps to create, PUT/PATCH to update and
    DELETE to delete. The check runs in ``initial()``, before the view
    touches storage, so a denied request never has a side effect and a
    missing id on a denied request still answers 403.

    Usage in views:
        class FlockListView(APIView):
            permission_classes = [IsAuthenticated, HasResourcePermission]
            rbac_resource = 'flocks'
    """

    message = 'You do not have permission to perform this action'

    def has_permission(self, request, view):
        if request.method in SAFE_METHODS:
            return True

        resource = getattr(view, 'rbac_resource', None)
        action = METHOD_ACTIONS.get(request.method)
        role = _role(request)

        if resource is None or action is None:
            return False

        if can_perform(role, resource, action):
            logger.debug(
                f"Permission granted: {role} may {action} {resource}",
                extra={
                    'role': role,
                    'resource': resource,
                    'action': action,
                    'view': view.__class__.__name__,
                }
            )
            return True

        from apps.core.logging import SecurityLogger

        self.message = f"User role {role} is not authorized to {action} {resource}"
        SecurityLogger.log_permission_denied(
            user=request.user,
            role=role,
            resource=resource,
            action=action,
            ip_address=_client_ip(request),
        )
        logger.warning(
            f"Permission denied: {role} may not {action} {resource}",
            extra={
                'user_id': str(getattr(request.user, 'id', '')),
                'role': role,
                'resource': resource,
                'action': action,
                'view': view.__class__.__name__,
                'method': request.method,
                'path': request.path,
                'request_id': getattr(request, 'request_id', None),
            }
        )
        return False


class HasRouteAccess(BasePermission):
    """
    Enforce ``can_access_route(role, route)`` for every method.

    Used for endpoints whose whole surface belongs to one page, such as user
    management or the financial report. The route comes from the view's
    ``rbac_route`` attribute, or from ``@requires_route`` on the handler.
    """

    message = 'You do not have permission to access this page'

    def has_permission(self, request, view):
        handler = getattr(view, request.method.lower(), None)
        route = getattr(handler, 'rbac_route', None) or getattr(view, 'rbac_route', None)

        if route is None:
            return True

        role = _role(request)
        if can_access_route(role, route):
            return True

        from apps.core.logging import SecurityLogger

        self.message = f"User role {role} is not authorized to access {route}"
        SecurityLogger.log_permission_denied(
            user=request.user,
            role=role,
            resource=route,
            action='access',
            ip_address=_client_ip(request),
        )
        return False


def requires_route(route):
    """
    Decorator to declare the page route a view class or handler belongs to.

    Checked by the HasRouteAccess permission class.

    Usage:
        class FinancialReportView(APIView):
            permission_classes = [IsAuthenticated, HasRouteAccess]

            @requires_route('reports')
            def get(self, request):
                pass
    """
    def decorator(view_or_method):
        if isinstance(view_or_method, type):
            view_or_method.rbac_route = route
            return view_or_method

        @wraps(view_or_method)
        def wrapped(self, request, *args, **kwargs):
            return view_or_method(self, request, *args, **kwargs)

        wrapped.rbac_route = route
        return wrapped

    return decorator
