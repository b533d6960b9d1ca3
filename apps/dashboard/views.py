"""
Dashboard 앱은 자체 모델을 가지지 않습니다.
기준 정보(Category, PaymentMode)의 건수를 집계해 요약 카드로 보여줍니다.
"""
import logging

from django.contrib.auth.decorators import login_required
from django.db import DatabaseError
from django.shortcuts import render
from django.urls import reverse

from apps.master.models import Category, PaymentMode

logger = logging.getLogger(__name__)


def safe_count(model):
    """정확한 전체 건수 (조회 실패 시 0)"""
    try:
        return model.objects.count()
    except DatabaseError as e:
        logger.error(f"{model.__name__} 건수 조회 실패: {e}", exc_info=True)
        return 0


def payment_modes_card(link=False):
    return {
        'title': 'Payment Modes',
        'icon': 'credit-card',
        'accent': 'blue',
        'count': safe_count(PaymentMode),
        'caption': 'Total active methods',
        'url': reverse('master:payment_mode_list') if link else None,
    }


def categories_card(link=False):
    return {
        'title': 'Categories',
        'icon': 'tag',
        'accent': 'emerald',
        'count': safe_count(Category),
        'caption': 'Total categories',
        'url': reverse('master:category_list') if link else None,
    }


@login_required
def dashboard(request):
    """대시보드: 결제 수단 요약 카드"""
    return render(request, 'dashboard/dashboard.html', {
        'cards': [payment_modes_card()],
    })


@login_required
def report(request):
    """리포트: 결제 수단 / 카테고리 요약 카드 (목록 화면으로 링크)"""
    return render(request, 'dashboard/report.html', {
        'cards': [payment_modes_card(link=True), categories_card(link=True)],
    })
