"""
Development settings for gym_server project.
"""

from decouple import config
from .base import *

DEBUG = config('DEBUG', default=True, cast=bool)

# SQLite unless a MySQL database is configured
if config('MYSQL_HOST', default=''):
    DATABASES['default']['NAME'] = config('MYSQL_DATABASE', default='gym_server_dev')
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': BASE_DIR / 'db.sqlite3',
        }
    }

# Email backend for development
EMAIL_BACKEND = config('EMAIL_BACKEND', default='django.core.mail.backends.console.EmailBackend')

# Rate limiting gets in the way while iterating locally
RATELIMIT_ENABLE = config('RATELIMIT_ENABLE', default=False, cast=bool)

# Logging for development
LOGGING['handlers']['console']['level'] = config('LOG_LEVEL', default='DEBUG')
LOGGING['root']['level'] = config('LOG_LEVEL', default='DEBUG')
