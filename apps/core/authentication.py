"""
Custom DRF authentication classes.
"""
from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication, get_authorization_header


class JWTAuthentication(BaseAuthentication):
    """
    DRF authentication class for ``Authorization: Bearer <token>`` headers.

    A request without the header is left anonymous so that
    ``IsAuthenticated`` can answer 401 "no token". A header carrying a bad
    token fails immediately with 401 "token failed".

    On success ``request.user`` is the stored user and ``request.auth`` the
    verified :class:`~apps.rbac.services.Principal`. The principal's role is
    taken from the stored user, so role changes apply to existing tokens.
    """

    keyword = 'Bearer'

    def authenticate(self, request):
        """
        Returns:
            tuple: (user, principal) if a valid token is present, None otherwise
        """
        from apps.core.exceptions import Unauthenticated
        from apps.rbac.services import AuthService

        auth = get_authorization_header(request).split()

        if not auth or auth[0].lower() != self.keyword.lower().encode():
            return None

        if len(auth) != 2:
            raise exceptions.AuthenticationFailed('Not authorized, token failed')

        try:
            token = auth[1].decode()
            principal = AuthService.verify_token(token)
            user = AuthService.resolve_user(principal)
        except UnicodeError:
            raise exceptions.AuthenticationFailed('Not authorized, token failed')
        except Unauthenticated as e:
            raise exceptions.AuthenticationFailed(e.message)

        return (user, principal.with_role(user.role))

    def authenticate_header(self, request):
        return self.keyword
