from io import StringIO

import pytest
from django.core.management import call_command

from apps.master.management.commands.seed_master_data import DEFAULT_CATEGORIES, DEFAULT_PAYMENT_MODES
from apps.master.models import Category, PaymentMode


@pytest.mark.django_db
class TestSeedMasterData:
    def test_seed_creates_defaults(self):
        out = StringIO()
        call_command('seed_master_data', stdout=out)

        assert Category.objects.count() == len(DEFAULT_CATEGORIES)
        assert PaymentMode.objects.count() == len(DEFAULT_PAYMENT_MODES)
        assert f'{len(DEFAULT_CATEGORIES) + len(DEFAULT_PAYMENT_MODES)} created' in out.getvalue()

    def test_seed_is_idempotent(self):
        call_command('seed_master_data', stdout=StringIO())
        out = StringIO()
        call_command('seed_master_data', stdout=out)

        assert Category.objects.count() == len(DEFAULT_CATEGORIES)
        assert '0 created' in out.getvalue()

    def test_seed_matches_existing_names_ignoring_case(self):
        """대소문자만 다른 기존 항목은 새로 만들지 않음"""
        Category.objects.create(name='groceries')
        PaymentMode.objects.create(mode='cash')

        call_command('seed_master_data', stdout=StringIO())

        assert Category.objects.filter(name__iexact='groceries').count() == 1
        assert PaymentMode.objects.filter(mode__iexact='cash').count() == 1
        assert Category.objects.count() == len(DEFAULT_CATEGORIES)
        assert PaymentMode.objects.count() == len(DEFAULT_PAYMENT_MODES)
