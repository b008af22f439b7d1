"""
ASGI config for ProductCatalog project.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "ProductCatalog.settings.dev")

application = get_asgi_application()
