from .base import *

DEBUG = False

ALLOWED_HOSTS = env_list('ALLOWED_HOSTS')

# 보안 설정
SECURE_SSL_REDIRECT = True
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
SECURE_CONTENT_TYPE_NOSNIFF = True

# CSRF 신뢰 출처
CSRF_TRUSTED_ORIGINS = env_list('CSRF_TRUSTED_ORIGINS')
