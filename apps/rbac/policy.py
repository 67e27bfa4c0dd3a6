"""
Role-based access policy.

One immutable, versioned table set answers two questions:

- ``can_access_route(role, route_key)``: may the role open a UI page?
- ``can_perform(role, resource, action)``: may the role create, update,
  delete or view records of a resource?

The server's permission classes and the UI (via ``GET /v1/auth/permissions``
or the ``export_policy`` command) read the same tables, so the two cannot
drift apart.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping


ADMIN = 'Admin'
MANAGER = 'Manager'
WORKER = 'Worker'
VETERINARIAN = 'Veterinarian'

ROLES = (ADMIN, MANAGER, WORKER, VETERINARIAN)

VIEW = 'view'
CREATE = 'create'
UPDATE = 'update'
DELETE = 'delete'

ACTIONS = (VIEW, CREATE, UPDATE, DELETE)


class PolicyError(Exception):
    """Raised when a policy's tables contradict each other."""


def _freeze(table):
    return MappingProxyType({key: frozenset(value) for key, value in table.items()})


@dataclass(frozen=True)
class Policy:
    """
    Route and action grants for every role.

    ``actions`` maps resource -> action -> roles. Admin is never listed; it
    is granted every known route and action. ``view`` on a resource is
    route access to the resource's page and is derived, not stored.
    """

    version: int
    routes: Mapping[str, FrozenSet[str]]
    actions: Mapping[str, Mapping[str, FrozenSet[str]]]
    resource_routes: Mapping[str, str]
    notification_senders: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        for resource, grants in self.actions.items():
            route = self.resource_routes.get(resource)
            if route is None or route not in self.routes:
                raise PolicyError(f"Resource '{resource}' has no page route")
            for action, roles in grants.items():
                if action not in ACTIONS or action == VIEW:
                    raise PolicyError(f"Unknown action '{action}' on '{resource}'")
                orphans = roles - self.routes[route] - {ADMIN}
                if orphans:
                    raise PolicyError(
                        f"{sorted(orphans)} may {action} {resource} but cannot open the '{route}' page"
                    )

    def can_access_route(self, role: str, route_key: str) -> bool:
        if route_key not in self.routes:
            return False
        if role == ADMIN:
            return True
        return role in self.routes[route_key]

    def can_perform(self, role: str, resource: str, action: str) -> bool:
        if resource not in self.actions or action not in ACTIONS:
            return False
        if role == ADMIN:
            return True
        if action == VIEW:
            return self.can_access_route(role, self.resource_routes[resource])
        return role in self.actions[resource].get(action, frozenset())

    def can_send_notifications(self, role: str) -> bool:
        return role == ADMIN or role in self.notification_senders

    def routes_for(self, role: str):
        """Route keys the role may open, in table order."""
        return [route for route in self.routes if self.can_access_route(role, route)]

    def actions_for(self, role: str):
        """Resource -> list of granted actions for the role."""
        return {
            resource: [action for action in ACTIONS if self.can_perform(role, resource, action)]
            for resource in self.actions
        }

    def as_dict(self):
        """Serializable form consumed by the frontend build."""
        return {
            'version': self.version,
            'roles': list(ROLES),
            'routes': {route: sorted({ADMIN} | roles) for route, roles in self.routes.items()},
            'actions': {
                resource: {
                    action: sorted({ADMIN} | grants.get(action, frozenset()))
                    for action in (CREATE, UPDATE, DELETE)
                }
                for resource, grants in self.actions.items()
            },
            'resource_routes': dict(self.resource_routes),
            'notification_senders': sorted({ADMIN} | self.notification_senders),
        }


POLICY = Policy(
    version=1,
    routes=_freeze({
        'dashboard': {MANAGER, WORKER, VETERINARIAN},
        'flocks': {MANAGER, VETERINARIAN},
        'production': {MANAGER, WORKER},
        'feeding': {MANAGER, WORKER},
        'health': {MANAGER, VETERINARIAN},
        'inventory': {MANAGER},
        'sales': {MANAGER},
        'expenses': {MANAGER},
        'reports': {MANAGER},
        'users': set(),
        'profile': {MANAGER, WORKER, VETERINARIAN},
    }),
    actions=MappingProxyType({
        'flocks': _freeze({
            CREATE: {MANAGER},
            UPDATE: {MANAGER},
            DELETE: set(),
        }),
        'production': _freeze({
            CREATE: {MANAGER, WORKER},
            UPDATE: {MANAGER},
            DELETE: {MANAGER},
        }),
        'feeding': _freeze({
            CREATE: {MANAGER, WORKER},
            UPDATE: {MANAGER},
            DELETE: {MANAGER},
        }),
        'health': _freeze({
            CREATE: {MANAGER, VETERINARIAN},
            UPDATE: {MANAGER, VETERINARIAN},
            DELETE: set(),
        }),
        'inventory': _freeze({
            CREATE: {MANAGER},
            UPDATE: {MANAGER},
            DELETE: set(),
        }),
        'sales': _freeze({
            CREATE: {MANAGER},
            UPDATE: {MANAGER},
            DELETE: set(),
        }),
        'expenses': _freeze({
            CREATE: {MANAGER},
            UPDATE: {MANAGER},
            DELETE: set(),
        }),
    }),
    resource_routes=MappingProxyType({
        'flocks': 'flocks',
        'production': 'production',
        'feeding': 'feeding',
        'health': 'health',
        'inventory': 'inventory',
        'sales': 'sales',
        'expenses': 'expenses',
    }),
    notification_senders=frozenset({MANAGER}),
)


def can_access_route(role: str, route_key: str) -> bool:
    """Whether ``role`` may open the UI page ``route_key``."""
    return POLICY.can_access_route(role, route_key)


def can_perform(role: str, resource: str, action: str) -> bool:
    """Whether ``role`` may apply ``action`` to records of ``resource``."""
    return POLICY.can_perform(role, resource, action)
