"""Django settings for the bowling scorer.

Games are kept in memory only, so no database is configured.
"""
import os

SECRET_KEY = os.environ.get('BOWLING_SECRET_KEY', 'bowling-insecure-key')

DEBUG = False

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'rest_framework',
    'bowling.apps.BowlingConfig',
]

DATABASES = {}

USE_TZ = True

TIME_ZONE = 'UTC'

REST_FRAMEWORK = {
    'DEFAULT_RENDERER_CLASSES': (
        'rest_framework.renderers.JSONRenderer',
    ),
    'UNAUTHENTICATED_USER': None,
}

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(module)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': os.environ.get('BOWLING_LOG_LEVEL', 'WARNING'),
    },
}

# Print the example game before the first interactive game.
BOWLING_SHOW_EXAMPLE_GAME = True
