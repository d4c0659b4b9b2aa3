# pharmasys/wsgi.py
"""
WSGI config for the PharmaSys project.
Defaults to dev settings unless DJANGO_SETTINGS_MODULE is set externally.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "pharmasys.settings.dev")

application = get_wsgi_application()
