"""Top-level package for Django configuration.

This package holds the settings modules for each environment, the Celery
application and the entry points for WSGI and ASGI of the rental booking
backend.
"""

# Import the Celery application as soon as Django starts. Without this
# the shared task registry will not be populated.
from .celery import app as celery_app  # noqa: F401
