"""
PATH: pharmasys/settings/__init__.py

Settings package entrypoint.

We intentionally do NOT import dev/prod here to avoid accidental environment coupling.
Use DJANGO_SETTINGS_MODULE to select:
- pharmasys.settings.dev   (local development)
- pharmasys.settings.prod  (production)
- pharmasys.settings.test  (test runs)
"""
