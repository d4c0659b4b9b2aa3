# configuration/apps.py

"""
CONFIGURATION APP CONFIG

Runtime business settings (low-stock threshold, near-expiry window)
stored in the Setting table and read through configuration.registry.
"""

from django.apps import AppConfig


class ConfigurationConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "configuration"
    verbose_name = "Business Settings"
