"""
Django settings for the Pakistan Locations backend.

Holds the administrative units (Province/District/Tehsil) and the
management command that seeds them from pakistan-provinces-districts-tehsils.json.
Configuration is read from the environment (and an optional .env file).
"""

import environ
import sentry_sdk
from pathlib import Path

from sentry_sdk.integrations.django import DjangoIntegration

# --- ENVIRONMENT CONFIGURATION ---
env = environ.Env()
# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent
environ.Env.read_env(BASE_DIR / '.env')

# --- CORE SECURITY SETTINGS ---
SECRET_KEY = env('DJANGO_SECRET_KEY', default='django-insecure-pakistan-locations-dev-key')
DEBUG = env.bool('DJANGO_DEBUG', default=True)
ALLOWED_HOSTS = env.list('DJANGO_ALLOWED_HOSTS', default=['localhost', '127.0.0.1'])

# --- APPLICATION DEFINITION ---
ROOT_URLCONF = 'backend.urls'
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# --- INSTALLED APPS CONFIGURATION ---
DJANGO_APPS = [
    # Unfold Admin Theme (Must be before admin)
    "unfold",
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
]

LOCAL_APPS = [
    'apps.common.core',              # Core Utilities & Base Models
    'apps.common.locations',         # Provinces, Districts, Tehsils
]

INSTALLED_APPS = DJANGO_APPS + LOCAL_APPS

# --- MIDDLEWARE CONFIGURATION ---
MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

# --- DATABASE CONFIGURATION ---
DATABASES = {
    'default': env.db('DATABASE_URL', default=f'sqlite:///{BASE_DIR / "db.sqlite3"}'),
}
DATABASES['default']['CONN_MAX_AGE'] = env.int('DB_CONN_MAX_AGE', default=0)

# --- CACHE ---
CACHES = {
    'default': env.cache('CACHE_URL', default='locmemcache://'),
}

# --- TEMPLATES ---
TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

# --- INTERNATIONALIZATION ---
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'Asia/Karachi'
USE_I18N = True
USE_TZ = True

STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

# --- LOCATION IMPORT ---
LOCATION_DATA_FILE = Path(env(
    'LOCATION_DATA_FILE',
    default=str(BASE_DIR / 'data' / 'pakistan-provinces-districts-tehsils.json'),
))
LOCATION_BACKUP_DIR = Path(env('LOCATION_BACKUP_DIR', default=str(BASE_DIR / 'storage' / 'backups')))

# --- OBSERVABILITY & LOGGING (SENTRY) ---
SENTRY_DSN = env('SENTRY_DSN', default=None)
if SENTRY_DSN:
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        integrations=[DjangoIntegration()],
        traces_sample_rate=env.float('SENTRY_TRACES_SAMPLE_RATE', default=0.1),
        send_default_pii=False,
    )

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'json': {
            '()': 'pythonjsonlogger.jsonlogger.JsonFormatter',
            'format': '%(levelname)s %(asctime)s %(name)s %(message)s %(pathname)s %(lineno)d',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'json',
        },
    },
    'loggers': {
        'django': {'handlers': ['console'], 'level': env('DJANGO_LOG_LEVEL', default='INFO'), 'propagate': True},
        'apps': {'handlers': ['console'], 'level': env('APPS_LOG_LEVEL', default='INFO'), 'propagate': True},
    },
}

# --- ADMIN THEME (UNFOLD) ---
UNFOLD = {
    "SITE_TITLE": "Pakistan Locations",
    "SITE_HEADER": "Pakistan Locations",
    "SHOW_HISTORY": False,
}
