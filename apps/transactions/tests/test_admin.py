"""
transactions 앱 admin.py 테스트
"""
from decimal import Decimal

import pytest
from django.contrib.admin.sites import AdminSite
from django.contrib.auth.models import User
from django.urls import reverse

from apps.transactions.admin import TransactionAdmin
from apps.transactions.models import Transaction


@pytest.fixture
def admin_user(db):
    """관리자 유저"""
    return User.objects.create_superuser(
        username='admin',
        email='admin@test.com',
        password='admin123'
    )


@pytest.fixture
def transaction_admin():
    return TransactionAdmin(Transaction, AdminSite())


@pytest.mark.django_db
class TestTransactionAdmin:
    def test_type_display_income(self, transaction_admin, make_transaction):
        tx = make_transaction(type='income')
        html = transaction_admin.get_type_display_colored(tx)
        assert 'green' in html
        assert 'Income' in html

    def test_type_display_expense(self, transaction_admin, make_transaction):
        tx = make_transaction(type='expense')
        html = transaction_admin.get_type_display_colored(tx)
        assert 'red' in html
        assert 'Expense' in html

    def test_amount_display(self, transaction_admin, make_transaction):
        tx = make_transaction(type='expense', amount=Decimal('99.90'))
        html = transaction_admin.get_amount_display(tx)
        assert '-99.90' in html
        assert 'red' in html

    def test_changelist_renders(self, client, admin_user, make_transaction):
        make_transaction(description='Stationery')
        client.force_login(admin_user)

        response = client.get(reverse('admin:transactions_transaction_changelist'))

        assert response.status_code == 200
        assert b'Stationery' in response.content
