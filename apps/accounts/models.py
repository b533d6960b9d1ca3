"""
로그인 세션 추적

Django 세션 테이블에는 사용자 컬럼이 없으므로,
로그인 시점에 (사용자, 세션 키)를 따로 기록해 동시 세션 수를 제한합니다.
"""
from django.conf import settings
from django.db import models

from apps.core.models import TimeStampedModel


class UserSession(TimeStampedModel):
    """사용자별 로그인 세션 기록"""

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='login_sessions')
    session_key = models.CharField(max_length=40, unique=True)

    class Meta:
        db_table = 'user_sessions'
        ordering = ['-created_on', '-id']

    def __str__(self):
        return f"{self.user} ({self.created_on:%Y-%m-%d %H:%M})"
