# Production settings: DJANGO_SETTINGS_MODULE=core.deployment
from .settings import *  # noqa: F401,F403
from .settings import MIDDLEWARE, env
import dj_database_url


WEBSITE_HOSTING = env("WEBSITE_HOSTING")

ALLOWED_HOSTS = [WEBSITE_HOSTING] + env.list('EXTRA_ALLOWED_HOSTS', default=[])

CSRF_TRUSTED_ORIGINS = ['https://' + host for host in ALLOWED_HOSTS]

# the frontend is served from its own origin
CORS_ALLOWED_ORIGINS = env.list('CORS_ALLOWED_ORIGINS', default=['https://' + WEBSITE_HOSTING])

DEBUG = False

SECURE_SSL_REDIRECT = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

SECURE_HSTS_SECONDS = 31536000
SECURE_HSTS_INCLUDE_SUBDOMAINS = True
SECURE_HSTS_PRELOAD = True

X_FRAME_OPTIONS = 'DENY'

# TLS terminates at the load-balancer
SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')

# whitenoise must sit right after SecurityMiddleware
_security = MIDDLEWARE.index('django.middleware.security.SecurityMiddleware')
MIDDLEWARE = MIDDLEWARE[:_security + 1] + ['whitenoise.middleware.WhiteNoiseMiddleware'] + MIDDLEWARE[_security + 1:]

DATABASES = {
    'default': dj_database_url.config(
        default=env('DATABASE_URL'),
        conn_max_age=600,
        conn_health_checks=True,
        ssl_require=True,
    )
}

STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedStaticFilesStorage",
    },
}
