"""
MIGRATION: SEED DEFAULT BUSINESS SETTINGS

LowStockThreshold = 10
NearExpiryDays    = 90

Existing rows are left untouched.
"""

from django.db import migrations

DEFAULTS = {
    "LowStockThreshold": "10",
    "NearExpiryDays": "90",
}


def seed_defaults(apps, schema_editor):
    Setting = apps.get_model("configuration", "Setting")
    for key, value in DEFAULTS.items():
        Setting.objects.get_or_create(key=key, defaults={"value": value})


def remove_defaults(apps, schema_editor):
    Setting = apps.get_model("configuration", "Setting")
    Setting.objects.filter(key__in=DEFAULTS.keys()).delete()


class Migration(migrations.Migration):

    dependencies = [
        ("configuration", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_defaults, remove_defaults),
    ]
