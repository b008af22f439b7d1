"""
WSGI config for ProductCatalog project.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "ProductCatalog.settings.dev")

application = get_wsgi_application()
