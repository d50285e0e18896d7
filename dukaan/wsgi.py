"""
WSGI config for dukaan project.

Gunicorn entry point: ``gunicorn dukaan.wsgi``
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'dukaan.settings')

application = get_wsgi_application()
