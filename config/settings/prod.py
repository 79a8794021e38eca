"""Production settings for the rental booking backend.

Ensure that sensitive values are provided via environment variables. The
booking guards only serialize across processes on PostgreSQL, so the
database engine defaults to it here.
"""

from .base import *  # noqa: F401,F403

# Never run with debug enabled in production
DEBUG = False

# Allowed hosts should be defined explicitly via environment variable
ALLOWED_HOSTS = os.environ.get('DJANGO_ALLOWED_HOSTS', '').split(',')  # noqa: F405

DATABASES = {
    'default': {
        'ENGINE': os.environ.get('DB_ENGINE', 'django.db.backends.postgresql'),  # noqa: F405
        'NAME': os.environ.get('DB_NAME', 'rental'),  # noqa: F405
        'USER': os.environ.get('DB_USER', 'rental'),  # noqa: F405
        'PASSWORD': os.environ.get('DB_PASSWORD', ''),  # noqa: F405
        'HOST': os.environ.get('DB_HOST', 'localhost'),  # noqa: F405
        'PORT': os.environ.get('DB_PORT', '5432'),  # noqa: F405
        'CONN_MAX_AGE': int(os.environ.get('DB_CONN_MAX_AGE', 60)),  # noqa: F405
    }
}

# Configure secure proxies and cookies
CSRF_COOKIE_SECURE = True
SESSION_COOKIE_SECURE = True
