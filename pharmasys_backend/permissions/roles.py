# permissions/roles.py

"""
ROLES + CAPABILITIES

Views never branch on raw roles. Each operation declares ONE required
capability (view.required_capability, optionally per action through
view.capability_map) and HasCapability evaluates it once per request
against the capability set of the caller's role.
"""

from __future__ import annotations

from typing import Optional

from rest_framework.permissions import BasePermission


# =========================================================
# ROLE CONSTANTS (STAFF JOB ROLES)
# =========================================================
ROLE_ADMIN = "Admin"
ROLE_CASHIER = "Cashier"

ROLE_CHOICES = [
    (ROLE_ADMIN, "Admin"),
    (ROLE_CASHIER, "Cashier"),
]

STAFF_ROLES = {ROLE_ADMIN, ROLE_CASHIER}


# =========================================================
# CAPABILITIES (THE REAL PERMISSION LANGUAGE)
# =========================================================
CAP_INVENTORY_VIEW = "inventory.view"
CAP_INVENTORY_RECEIVE = "inventory.receive"
CAP_INVENTORY_ADJUST = "inventory.adjust"

CAP_POS_SELL = "pos.sell"
CAP_POS_VOID = "pos.void"

CAP_SALES_VIEW = "sales.view"

CAP_SETTINGS_VIEW = "settings.view"
CAP_SETTINGS_MANAGE = "settings.manage"

CAP_USERS_MANAGE = "users.manage"

ALL_CAPABILITIES = frozenset(
    {
        CAP_INVENTORY_VIEW,
        CAP_INVENTORY_RECEIVE,
        CAP_INVENTORY_ADJUST,
        CAP_POS_SELL,
        CAP_POS_VOID,
        CAP_SALES_VIEW,
        CAP_SETTINGS_VIEW,
        CAP_SETTINGS_MANAGE,
        CAP_USERS_MANAGE,
    }
)


# =========================================================
# ROLE → CAPABILITY MAP
# =========================================================
ROLE_CAPABILITIES: dict[str, frozenset[str]] = {
    ROLE_ADMIN: ALL_CAPABILITIES,
    ROLE_CASHIER: frozenset(
        {
            CAP_INVENTORY_VIEW,
            CAP_POS_SELL,
            CAP_SALES_VIEW,
            CAP_SETTINGS_VIEW,
        }
    ),
}


# =========================================================
# Helpers
# =========================================================
def get_user_role(user) -> Optional[str]:
    return getattr(user, "role", None)


def capabilities_for(user) -> frozenset[str]:
    return ROLE_CAPABILITIES.get(get_user_role(user), frozenset())


def has_capability(user, capability: str) -> bool:
    return capability in capabilities_for(user)


def required_capability_for(view) -> Optional[str]:
    """
    Resolve the capability an operation requires.

    ViewSets may declare capability_map = {"list": ..., "create": ...};
    plain APIViews key the same map by HTTP method ("get", "put").
    Anything else uses required_capability.
    """
    capability_map = getattr(view, "capability_map", None) or {}
    action = getattr(view, "action", None)
    if action is None and getattr(view, "request", None) is not None:
        action = view.request.method.lower()
    if action and action in capability_map:
        return capability_map[action]
    return getattr(view, "required_capability", None)


# =========================================================
# Capability Permission
# =========================================================
class HasCapability(BasePermission):
    """
    Require the capability declared by the view.

    Usage:
        permission_classes = [IsAuthenticated, HasCapability]
        required_capability = CAP_INVENTORY_ADJUST
    """

    message = "Forbidden: insufficient permissions."

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        required = required_capability_for(view)
        if not required:
            # Deny-by-default to avoid accidental open endpoints
            return False

        return has_capability(user, required)
