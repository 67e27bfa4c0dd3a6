"""
Django settings for the Poultry Farm Management API.
"""
import os
import warnings
from pathlib import Path
import environ
import sentry_sdk
from sentry_sdk.integrations.django import DjangoIntegration

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent

# Initialize environment variables
env = environ.Env(
    DEBUG=(bool, False),
    ALLOWED_HOSTS=(list, ['localhost', '127.0.0.1']),
    DB_CONN_MAX_AGE=(int, 600),
    RATE_LIMIT_ENABLED=(bool, True),
    JSON_LOGS=(bool, False),
    LOG_LEVEL=(str, 'INFO'),
    LOG_TO_FILE=(bool, False),
)

# Read .env file if it exists
environ.Env.read_env(os.path.join(BASE_DIR, '.env'))

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = env('SECRET_KEY', default='django-insecure-poultry-farm-dev-key-change-me')

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = env('DEBUG')

if not DEBUG and SECRET_KEY.startswith('django-insecure-'):
    warnings.warn(
        "SECRET_KEY is using the development default. "
        "Set SECRET_KEY in .env before deploying."
    )

ALLOWED_HOSTS = env('ALLOWED_HOSTS')

USE_X_FORWARDED_HOST = True
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')

# Application definition
INSTALLED_APPS = [
    'django.contrib.admin',
    'django.contrib.auth',
    'django.contrib.contenttypes',
    'django.contrib.sessions',
    'django.contrib.messages',
    'django.contrib.staticfiles',

    # Third-party apps
    'rest_framework',
    'drf_spectacular',
    'corsheaders',
    'django_ratelimit',

    # Farm apps
    'apps.core',
    'apps.rbac',
    'apps.flocks',
    'apps.feeding',
    'apps.production',
    'apps.health',
    'apps.inventory',
    'apps.finance',
    'apps.notifications',
    'apps.reports',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'corsheaders.middleware.CorsMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',

    # Custom middleware
    'apps.core.middleware.RequestIDMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'django.contrib.auth.context_processors.auth',
                'django.contrib.messages.context_processors.messages',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'

# Database
# PostgreSQL (psycopg) in production, SQLite for local development
DATABASES = {
    'default': env.db('DATABASE_URL', default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
}
DATABASES['default']['CONN_MAX_AGE'] = env('DB_CONN_MAX_AGE')

# Configure based on database engine
if 'postgresql' in DATABASES['default']['ENGINE']:
    DATABASES['default']['OPTIONS'] = {
        'connect_timeout': 10,
    }

# Password validation
AUTH_PASSWORD_VALIDATORS = [
    {
        'NAME': 'django.contrib.auth.password_validation.MinimumLengthValidator',
        'OPTIONS': {'min_length': 6},
    },
]

# Internationalization
LANGUAGE_CODE = 'en-us'
TIME_ZONE = env('TIME_ZONE', default='UTC')
USE_I18N = True
USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = 'static/'
STATIC_ROOT = BASE_DIR / 'staticfiles'

# Default primary key field type
DEFAULT_AUTO_FIELD = 'django.db.models.BigAutoField'

# Custom User Model
AUTH_USER_MODEL = 'rbac.User'

# Authentication Backends
AUTHENTICATION_BACKENDS = [
    'apps.rbac.backends.EmailAuthBackend',
]

# REST Framework
REST_FRAMEWORK = {
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',
    'DEFAULT_RENDERER_CLASSES': [
        'rest_framework.renderers.JSONRenderer',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
    ],
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'apps.core.authentication.JWTAuthentication',
    ],
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
    ],
    'UNAUTHENTICATED_USER': None,
    'COERCE_DECIMAL_TO_STRING': False,
    'DATE_INPUT_FORMATS': ['iso-8601'],
    'EXCEPTION_HANDLER': 'apps.core.exceptions.custom_exception_handler',
}

# DRF Spectacular (OpenAPI)
SPECTACULAR_SETTINGS = {
    'TITLE': 'Poultry Farm Management API',
    'DESCRIPTION': '''
Record keeping for a poultry farm: flocks, feeding, production, health,
inventory, sales, expenses, notifications and aggregate reports.

## Authentication

All endpoints except registration, login and the status check require a JWT:
- `Authorization: Bearer <token>` - token obtained from `/v1/auth/login` or `/v1/auth/register`

## Rate Limiting

| Endpoint | Rate Limit | Key Type |
|----------|-----------|----------|
| `POST /v1/auth/register` | 3/hour | IP address |
| `POST /v1/auth/login` | 5/min per IP, 10/hour per email | IP + Email |

When a rate limit is exceeded the API returns `429 Too Many Requests` with a `Retry-After` header.

## Authorization (RBAC)

Four roles: **Admin**, **Manager**, **Worker**, **Veterinarian**.

Every mutating endpoint checks the role's action grant for the resource before
touching storage. Admin is granted everything. The full route and action
tables are served at `GET /v1/auth/permissions`.

| Resource | create | update | delete |
|----------|--------|--------|--------|
| flocks | Manager | Manager | Admin only |
| production | Manager, Worker | Manager | Manager |
| feeding | Manager, Worker | Manager | Manager |
| health | Manager, Veterinarian | Manager, Veterinarian | Admin only |
| inventory | Manager | Manager | Admin only |
| sales | Manager | Manager | Admin only |
| expenses | Manager | Manager | Admin only |

## Response envelope

Every response has the shape `{"success": bool, "message": str, "data": ..., "count": int}`.
Errors carry `success: false` and a human-readable `message`.
    ''',
    'VERSION': '1.0.0',
    'SERVE_INCLUDE_SCHEMA': False,
    'COMPONENT_SPLIT_REQUEST': True,
    'SCHEMA_PATH_PREFIX': r'/v1/',
    'SWAGGER_UI_SETTINGS': {
        'deepLinking': True,
        'persistAuthorization': True,
        'filter': True,
    },
    'SECURITY': [
        {
            'JWTAuth': []
        }
    ],
    'APPEND_COMPONENTS': {
        'securitySchemes': {
            'JWTAuth': {
                'type': 'http',
                'scheme': 'bearer',
                'bearerFormat': 'JWT',
                'description': 'JWT token obtained from /v1/auth/login or /v1/auth/register. Include as: Authorization: Bearer <token>.',
            }
        }
    },
    'TAGS': [
        {'name': 'Authentication', 'description': 'Registration, login, profile and permission tables'},
        {'name': 'Users', 'description': 'User management (Admin)'},
        {'name': 'Flocks', 'description': 'Poultry batches'},
        {'name': 'Feeding', 'description': 'Feed consumption records'},
        {'name': 'Production', 'description': 'Egg collection and mortality records'},
        {'name': 'Health', 'description': 'Vaccinations, treatments and health alerts'},
        {'name': 'Inventory', 'description': 'Stock items and low-stock alerts'},
        {'name': 'Sales', 'description': 'Sales records'},
        {'name': 'Expenses', 'description': 'Expense records'},
        {'name': 'Notifications', 'description': 'Per-user notifications'},
        {'name': 'Reports', 'description': 'Aggregate production, financial, performance and inventory reports'},
        {'name': 'Status', 'description': 'Service liveness and dependency checks'},
    ],
}

# ============================================================================
# SECURITY SETTINGS
# ============================================================================

# HTTPS Enforcement (Production Only)
if not DEBUG:
    SECURE_SSL_REDIRECT = env.bool('SECURE_SSL_REDIRECT', default=True)
    SECURE_HSTS_SECONDS = 31536000  # 1 year
    SECURE_HSTS_INCLUDE_SUBDOMAINS = True
    SESSION_COOKIE_SECURE = True
    CSRF_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    CSRF_COOKIE_HTTPONLY = True
else:
    SECURE_SSL_REDIRECT = False
    SECURE_HSTS_SECONDS = 0
    SESSION_COOKIE_SECURE = False
    CSRF_COOKIE_SECURE = False

# Security Headers (All Environments)
SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = 'DENY'

# CORS Configuration
CORS_ALLOW_ALL_ORIGINS = DEBUG
CORS_ALLOWED_ORIGINS = env.list('CORS_ALLOWED_ORIGINS', default=[])

if not DEBUG:
    for origin in CORS_ALLOWED_ORIGINS:
        if not origin.startswith('https://'):
            raise environ.ImproperlyConfigured(
                f"CORS origin must use HTTPS in production: {origin}. "
                f"Update CORS_ALLOWED_ORIGINS in .env"
            )

CORS_ALLOW_CREDENTIALS = True
CORS_ALLOW_HEADERS = [
    'accept',
    'accept-encoding',
    'authorization',
    'content-type',
    'origin',
    'user-agent',
    'x-requested-with',
    'x-request-id',
]

# Cache
# Redis (django-redis) when CACHE_URL points at redis://, local memory otherwise
CACHES = {
    'default': env.cache('CACHE_URL', default='locmemcache://'),
}
if CACHES['default']['BACKEND'].startswith('django_redis'):
    CACHES['default'].setdefault('OPTIONS', {}).update({
        'SOCKET_CONNECT_TIMEOUT': 5,
        'SOCKET_TIMEOUT': 5,
    })
    CACHES['default']['KEY_PREFIX'] = 'poultry'

# Rate Limiting
RATE_LIMIT_ENABLED = env('RATE_LIMIT_ENABLED')

# Django-ratelimit configuration
RATELIMIT_USE_CACHE = 'default'
RATELIMIT_ENABLE = RATE_LIMIT_ENABLED

# A per-process cache is fine for development; production should use CACHE_URL=redis://
SILENCED_SYSTEM_CHECKS = ['django_ratelimit.E003', 'django_ratelimit.W001']

# Logging Configuration
LOG_LEVEL = env('LOG_LEVEL')
JSON_LOGS = env('JSON_LOGS')
LOG_TO_FILE = env('LOG_TO_FILE')
LOG_DIR = BASE_DIR / 'logs'

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'json': {
            '()': 'apps.core.logging.JSONFormatter',
        },
        'verbose': {
            '()': 'apps.core.log_sanitizer.SanitizingFormatter',
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            '()': 'apps.core.log_sanitizer.SanitizingFormatter',
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'filters': {
        'sanitize': {
            '()': 'apps.core.log_sanitizer.SanitizingFilter',
        },
        'request_id': {
            '()': 'apps.core.middleware.LoggingFilter',
        },
    },
    'handlers': {
        'console': {
            'level': LOG_LEVEL,
            'class': 'logging.StreamHandler',
            'formatter': 'json' if JSON_LOGS else 'verbose',
            'filters': ['sanitize', 'request_id'],
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'django.request': {
            'handlers': ['console'],
            'level': 'ERROR',
            'propagate': False,
        },
        'apps': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'security': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
    },
}

if LOG_TO_FILE:
    LOG_DIR.mkdir(exist_ok=True)
    LOGGING['handlers']['file'] = {
        'level': 'INFO',
        'class': 'logging.handlers.RotatingFileHandler',
        'filename': LOG_DIR / 'farm.log',
        'maxBytes': 1024 * 1024 * 10,  # 10 MB
        'backupCount': 5,
        'formatter': 'json' if JSON_LOGS else 'verbose',
        'filters': ['sanitize', 'request_id'],
    }
    LOGGING['handlers']['security'] = {
        'level': 'INFO',
        'class': 'logging.handlers.RotatingFileHandler',
        'filename': LOG_DIR / 'security.log',
        'maxBytes': 1024 * 1024 * 10,  # 10 MB
        'backupCount': 10,
        'formatter': 'json' if JSON_LOGS else 'verbose',
        'filters': ['sanitize', 'request_id'],
    }
    LOGGING['loggers']['django.request']['handlers'].append('file')
    LOGGING['loggers']['apps']['handlers'].append('file')
    LOGGING['loggers']['security']['handlers'].append('security')

# Sentry Configuration
SENTRY_DSN = env('SENTRY_DSN', default=None)
SENTRY_ENVIRONMENT = env('SENTRY_ENVIRONMENT', default='development')
SENTRY_RELEASE = env('SENTRY_RELEASE', default=None)

if SENTRY_DSN:
    sentry_sdk.init(
        dsn=SENTRY_DSN,
        integrations=[
            DjangoIntegration(),
        ],
        environment=SENTRY_ENVIRONMENT,
        release=SENTRY_RELEASE,
        traces_sample_rate=0.1 if not DEBUG else 1.0,
        send_default_pii=False,
        attach_stacktrace=True,
        max_breadcrumbs=50,
    )

# JWT Authentication Configuration
# Token issuance fails with ConfigError while JWT_SECRET_KEY is unset.
JWT_SECRET_KEY = env('JWT_SECRET_KEY', default=None)

def _validate_jwt_secret(key: str) -> None:
    """
    Reject weak JWT secrets.

    Checks:
    - At least 32 characters
    - Different from SECRET_KEY
    - At least 16 unique characters
    """
    if len(key) < 32:
        raise environ.ImproperlyConfigured(
            "JWT_SECRET_KEY must be at least 32 characters long. "
            "Current length: {}. Generate a strong key with: "
            "python -c \"import secrets; print(secrets.token_urlsafe(32))\"".format(len(key))
        )

    if key == SECRET_KEY:
        raise environ.ImproperlyConfigured(
            "JWT_SECRET_KEY must be different from SECRET_KEY. "
            "Generate a separate JWT key with: "
            "python -c \"import secrets; print(secrets.token_urlsafe(32))\""
        )

    unique_chars = len(set(key))
    if unique_chars < 16:
        raise environ.ImproperlyConfigured(
            f"JWT_SECRET_KEY has insufficient entropy. "
            f"Found only {unique_chars} unique characters, need at least 16."
        )

if JWT_SECRET_KEY:
    _validate_jwt_secret(JWT_SECRET_KEY)

JWT_ALGORITHM = env('JWT_ALGORITHM', default='HS256')
JWT_EXPIRATION_HOURS = env.int('JWT_EXPIRATION_HOURS', default=24 * 7)

# Seed accounts (manage.py seed_users)
SEED_USER_PASSWORD = env('SEED_USER_PASSWORD', default=None)
