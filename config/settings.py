"""
Akouendy Billing - Django Settings
Host project for the billing app (development and tests).
"""

import os
from pathlib import Path
from dotenv import load_dotenv
import dj_database_url

load_dotenv()

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv('SECRET_KEY', 'billing-insecure-dev-key-change-in-production')
DEBUG = os.getenv('DEBUG', 'True').lower() == 'true'
ALLOWED_HOSTS = os.getenv('ALLOWED_HOSTS', 'localhost,127.0.0.1,testserver').split(',')

# Application definition
INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',
    # Billing SDK
    'billing.apps.BillingAppConfig',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
]

ROOT_URLCONF = 'config.urls'

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

# Database
DATABASES = {
    'default': dj_database_url.config(
        default=f'sqlite:///{BASE_DIR / "db.sqlite3"}'
    )
}

# Internationalization
LANGUAGE_CODE = 'en-us'
TIME_ZONE = 'UTC'
USE_I18N = True
USE_TZ = True

STATIC_URL = '/static/'

DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# ============ Billing: Akouendy ============
# BILLING_ENV: sandbox | prod (anything else falls back to sandbox)
BILLING_ENV = os.getenv('BILLING_ENV', 'sandbox')
BILLING_APP_ID = os.getenv('BILLING_APP_ID', '')
BILLING_APP_TOKEN = os.getenv('BILLING_APP_TOKEN', '')
BILLING_APP_BASE_URL = os.getenv('BILLING_APP_BASE_URL', '')
BILLING_DEBUG = os.getenv('BILLING_DEBUG', 'False').lower() == 'true'
BILLING_USER_AGENT = os.getenv('BILLING_USER_AGENT', 'akouendy-billing-api-sdk/v1.0')
BILLING_DEFAULT_COUNTRY = os.getenv('BILLING_DEFAULT_COUNTRY', 'SEN')
BILLING_TIMEOUT = float(os.getenv('BILLING_TIMEOUT', '30'))
# Legacy: log and return an empty response when a 2xx body is not JSON
BILLING_LEGACY_SILENT_DECODE = os.getenv('BILLING_LEGACY_SILENT_DECODE', 'False').lower() == 'true'

# ============ Logging ============
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'level': 'DEBUG',
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': os.getenv('LOG_LEVEL', 'INFO'),
    },
}
