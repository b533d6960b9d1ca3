"""
동시 로그인 세션 수 제한 시그널

    1. 로그인 → UserSession 기록 → 한도(MAX_SESSIONS_PER_USER) 초과분 중 오래된 세션 종료
    2. 로그아웃 → 해당 UserSession 기록 삭제
"""
import logging
from importlib import import_module

from django.conf import settings
from django.contrib.auth.signals import user_logged_in, user_logged_out
from django.dispatch import receiver

from .models import UserSession

logger = logging.getLogger(__name__)


def enforce_session_limit(user, limit=None):
    """
    한도를 넘는 오래된 세션을 종료하고 종료한 건수를 반환

    Example:
        한도 2, 세션 3개 → 가장 오래된 1개 세션 삭제 (해당 브라우저는 로그아웃됨)
    """
    if limit is None:
        limit = settings.MAX_SESSIONS_PER_USER

    stale = list(UserSession.objects.filter(user=user).order_by('-created_on', '-id')[limit:])
    if not stale:
        return 0

    session_store = import_module(settings.SESSION_ENGINE).SessionStore
    for record in stale:
        session_store(session_key=record.session_key).delete()

    UserSession.objects.filter(pk__in=[record.pk for record in stale]).delete()
    logger.info(f"세션 한도 초과로 {len(stale)}개 세션 종료: {user.username}")
    return len(stale)


@receiver(user_logged_in)
def register_login_session(sender, request, user, **kwargs):
    """로그인 시 세션 기록 후 한도 적용"""
    session = getattr(request, 'session', None)
    if session is None:
        return
    if not session.session_key:
        session.save()

    UserSession.objects.update_or_create(
        session_key=session.session_key,
        defaults={'user': user},
    )
    enforce_session_limit(user)


@receiver(user_logged_out)
def forget_login_session(sender, request, user, **kwargs):
    """로그아웃 시 세션 기록 삭제"""
    session = getattr(request, 'session', None)
    if session is None or not session.session_key:
        return
    UserSession.objects.filter(session_key=session.session_key).delete()
