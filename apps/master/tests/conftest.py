"""
master 앱 테스트용 공통 fixture
"""
import pytest
from decimal import Decimal
from django.contrib.auth.models import User
from django.utils import timezone

from apps.master.models import Category, PaymentMode
from apps.transactions.models import Transaction


@pytest.fixture
def test_user(db):
    return User.objects.create_user(username='tester', password='pass')


@pytest.fixture
def auth_client(client, test_user):
    client.login(username='tester', password='pass')
    return client


@pytest.fixture
def category(db):
    return Category.objects.create(name='Travel')


@pytest.fixture
def payment_mode(db):
    return PaymentMode.objects.create(mode='Credit Card')


@pytest.fixture
def used_transaction(category, payment_mode):
    """카테고리/결제 수단을 사용하는 거래"""
    return Transaction.objects.create(
        transaction_date=timezone.localdate(),
        amount=Decimal('10.00'),
        type='expense',
        category=category,
        payment_mode=payment_mode,
    )
