"""
공용 레이아웃(사이드바/헤더)에 필요한 데이터

모든 템플릿에서 사용:
    - site_title: 화면 제목
    - teams: 사이드바 상단 팀 표시
    - nav_main: 주요 메뉴 (거래, 리포트)
    - nav_projects: 기준 정보 메뉴 (결제 수단, 카테고리)
    - sidebar_user: 로그인 사용자 표시 정보
"""
from django.conf import settings
from django.urls import reverse

DEFAULT_USER_NAME = 'User'


def get_user_display(user):
    """
    사이드바 사용자 표시 정보

    이름 우선순위: 전체 이름 > 이메일 @ 앞부분 > 'User'
    """
    if user is None or not user.is_authenticated:
        return {'name': DEFAULT_USER_NAME, 'email': '', 'avatar': ''}

    email = user.email or ''
    name = user.get_full_name() or email.split('@')[0] or DEFAULT_USER_NAME
    return {'name': name, 'email': email, 'avatar': ''}


def navigation(request):
    user = getattr(request, 'user', None)
    path = request.path

    def item(title, url_name, icon):
        url = reverse(url_name)
        return {'title': title, 'url': url, 'icon': icon, 'active': path.startswith(url)}

    return {
        'site_title': getattr(settings, 'SITE_TITLE', 'ERP'),
        'teams': [{'name': 'ERP', 'plan': 'by varamio'}],
        'nav_main': [
            item('Transactions', 'transactions:transaction_list', 'square-chart-gantt'),
            item('Report', 'report', 'bar-chart'),
        ],
        'nav_projects': [
            item('Payment Modes', 'master:payment_mode_list', 'credit-card'),
            item('Categories', 'master:category_list', 'tag'),
        ],
        'sidebar_user': get_user_display(user),
    }
