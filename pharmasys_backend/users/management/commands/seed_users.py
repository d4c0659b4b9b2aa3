# users/management/commands/seed_users.py

from __future__ import annotations

from dataclasses import dataclass

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from permissions.roles import ROLE_ADMIN, ROLE_CASHIER
from users.services import MIN_PASSWORD_LENGTH


@dataclass(frozen=True)
class SeedUserSpec:
    username: str
    role: str
    full_name: str
    password_option: str


SEED_USERS = [
    SeedUserSpec("admin", ROLE_ADMIN, "System Administrator", "admin_password"),
    SeedUserSpec("cashier1", ROLE_CASHIER, "Front Desk Cashier", "cashier_password"),
]


class Command(BaseCommand):
    help = "Seed the default staff accounts (admin + cashier1). Idempotent."

    def add_arguments(self, parser):
        parser.add_argument(
            "--admin-password",
            type=str,
            default="admin123!",
            help="Password for 'admin' (default: admin123!)",
        )
        parser.add_argument(
            "--cashier-password",
            type=str,
            default="cashier123!",
            help="Password for 'cashier1' (default: cashier123!)",
        )
        parser.add_argument(
            "--force-password",
            action="store_true",
            help="Reset passwords for existing seeded users too.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        force_password = bool(options.get("force_password"))
        User = get_user_model()

        for spec in SEED_USERS:
            if len(options.get(spec.password_option) or "") < MIN_PASSWORD_LENGTH:
                raise CommandError(
                    f"--{spec.password_option.replace('_', '-')} must be at least "
                    f"{MIN_PASSWORD_LENGTH} characters."
                )

        created_count = 0
        updated_count = 0

        for spec in SEED_USERS:
            password = options[spec.password_option]
            is_admin = spec.role == ROLE_ADMIN

            user = User.objects.filter(username__iexact=spec.username).first()

            if user is None:
                User.objects.create_user(
                    spec.username,
                    password=password,
                    role=spec.role,
                    full_name=spec.full_name,
                    is_staff=is_admin,
                    is_superuser=is_admin,
                )
                created_count += 1
                self.stdout.write(f"created: {spec.username} ({spec.role})")
                continue

            dirty = False
            if user.role != spec.role:
                user.role = spec.role
                dirty = True
            if not user.is_active:
                user.is_active = True
                dirty = True
            if force_password:
                user.set_password(password)
                dirty = True

            if dirty:
                user.save()
                updated_count += 1

            self.stdout.write(f"exists:  {spec.username} ({spec.role})")

        self.stdout.write("\n--- Summary ---")
        self.stdout.write(f"Created: {created_count}")
        self.stdout.write(f"Updated: {updated_count}")
