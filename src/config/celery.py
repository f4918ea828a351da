"""
Celery application for the products service.

Celery is the RPC transport: every message pattern is a task routed to the
``PRODUCTS_QUEUE`` queue, and replies travel back through the result backend.
``DJANGO_SETTINGS_MODULE`` is set before the app is created so Celery reads
its configuration from Django settings (``CELERY_`` prefix).
"""

import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

app = Celery("products")

# Reads Django settings with the CELERY_ prefix
app.config_from_object("django.conf:settings", namespace="CELERY")

# Discovers tasks.py in every installed app
app.autodiscover_tasks()
