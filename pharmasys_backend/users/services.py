# users/services.py

"""
USER SERVICES

- authenticate_credentials: login check with an undifferentiated failure
- create_staff_user / delete_staff_user: admin-only account management

Services raise common.exceptions errors; views never build error responses.
"""

from __future__ import annotations

import logging

from django.contrib.auth import get_user_model
from django.db import transaction

from common.exceptions import (
    AuthenticationError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from permissions.roles import ROLE_ADMIN, STAFF_ROLES

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


# =========================================================
# LOGIN
# =========================================================
def authenticate_credentials(*, username: str, password: str):
    """
    Return the active user matching username/password.

    Unknown user, wrong password and inactive account all raise the same
    AuthenticationError so callers cannot tell which usernames exist.
    """
    User = get_user_model()
    username = (username or "").strip()

    user = User.objects.filter(username__iexact=username).first() if username else None

    if user is None:
        # Run the hasher once anyway to keep response timing uniform.
        User().set_password(password or "")
        raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

    if not user.check_password(password or "") or not user.is_active:
        raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

    return user


# =========================================================
# MANAGEMENT
# =========================================================
@transaction.atomic
def create_staff_user(
    *,
    username: str,
    password: str,
    full_name: str,
    role: str,
    acting_user=None,
):
    User = get_user_model()

    username = (username or "").strip()
    full_name = (full_name or "").strip()

    if not username or not password or not full_name or not role:
        raise ValidationError("username, password, full_name and role are required.")

    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters."
        )

    if role not in STAFF_ROLES:
        raise ValidationError(f"role must be one of: {', '.join(sorted(STAFF_ROLES))}")

    if User.objects.filter(username__iexact=username).exists():
        raise ValidationError("Username already exists.")

    user = User.objects.create_user(
        username,
        password=password,
        full_name=full_name,
        role=role,
        is_staff=role == ROLE_ADMIN,
    )

    logger.info(
        "User created",
        extra={
            "user_id": user.id,
            "username": user.username,
            "role": user.role,
            "created_by": getattr(acting_user, "username", None),
        },
    )
    return user


@transaction.atomic
def delete_staff_user(*, user_id: int, acting_user) -> None:
    User = get_user_model()

    user = User.objects.select_for_update().filter(pk=user_id).first()
    if user is None:
        raise NotFoundError("User not found.")

    if user.pk == acting_user.pk:
        raise InvalidStateError("You cannot delete your own account.")

    username = user.username
    user.delete()

    logger.info(
        "User deleted",
        extra={"user_id": user_id, "username": username, "deleted_by": acting_user.username},
    )
