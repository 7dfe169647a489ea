"""
Role capabilities for the front-end.

Roles are labels: the API only requires an authenticated session and
never checks these capabilities itself.  The session endpoint returns
the map so the client can decide which actions to offer.
"""
from rest_framework.permissions import BasePermission, SAFE_METHODS

ROLES = ("admin", "doctor", "staff")

CAPABILITIES = {
    "admin": {
        "patients": ["view", "create", "update", "discharge"],
        "doctors": ["view", "create", "update"],
        "rooms": ["view", "create", "update", "status", "clean"],
        "appointments": ["view", "create", "update", "status"],
        "medicalRecords": ["view", "create"],
        "invoices": ["view", "create", "update", "print"],
        "faceSheets": ["view", "create", "delete", "print"],
        "reports": ["view"],
    },
    "doctor": {
        "patients": ["view", "update", "discharge"],
        "doctors": ["view"],
        "rooms": ["view"],
        "appointments": ["view", "status"],
        "medicalRecords": ["view", "create"],
        "invoices": ["view"],
        "faceSheets": ["view", "print"],
        "reports": [],
    },
    "staff": {
        "patients": ["view", "create", "update"],
        "doctors": ["view"],
        "rooms": ["view", "status", "clean"],
        "appointments": ["view", "create", "update", "status"],
        "medicalRecords": ["view"],
        "invoices": ["view", "create", "print"],
        "faceSheets": ["view", "create", "print"],
        "reports": [],
    },
}


def capabilities_for(user) -> dict:
    """Return the capability map for a user's role (staff when unknown)."""
    role = getattr(user, "role", None)
    return CAPABILITIES.get(role, CAPABILITIES["staff"])


class ReadOnly(BasePermission):
    """Allow read-only access (GET, HEAD, OPTIONS)."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        return request.method in SAFE_METHODS
