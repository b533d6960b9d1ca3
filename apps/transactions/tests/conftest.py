"""
transactions 앱 테스트용 공통 fixture
"""
import pytest
from decimal import Decimal
from django.contrib.auth.models import User
from django.utils import timezone

from apps.master.models import Category, PaymentMode
from apps.transactions.models import Transaction


@pytest.fixture
def test_user(db):
    """테스트용 사용자"""
    return User.objects.create_user(username='tester', password='pass')


@pytest.fixture
def auth_client(client, test_user):
    """로그인된 클라이언트"""
    client.login(username='tester', password='pass')
    return client


@pytest.fixture
def category(db):
    return Category.objects.create(name='Groceries')


@pytest.fixture
def other_category(db):
    return Category.objects.create(name='Salary')


@pytest.fixture
def payment_mode(db):
    return PaymentMode.objects.create(mode='Cash')


@pytest.fixture
def make_transaction(category, payment_mode):
    """거래 생성 헬퍼"""
    def _make(**kwargs):
        values = {
            'transaction_date': timezone.localdate(),
            'amount': Decimal('100.00'),
            'type': Transaction.TYPE_EXPENSE,
            'category': category,
            'payment_mode': payment_mode,
            'description': None,
        }
        values.update(kwargs)
        return Transaction.objects.create(**values)
    return _make


@pytest.fixture
def form_data(category, payment_mode):
    """유효한 거래 입력값"""
    return {
        'transaction_date': timezone.localdate().isoformat(),
        'type': 'expense',
        'amount': '250.50',
        'category': category.pk,
        'payment_mode': payment_mode.pk,
        'description': '  Weekly groceries  ',
    }
