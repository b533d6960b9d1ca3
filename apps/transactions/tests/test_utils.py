from datetime import datetime
from decimal import Decimal

import openpyxl
import pytest

from apps.transactions.models import Transaction
from apps.transactions.utils import (
    EXPORT_HEADERS,
    export_filename,
    export_transactions_to_excel,
    filter_transactions,
)


@pytest.mark.django_db
class TestFilterTransactions:
    def test_empty_term_returns_everything(self, make_transaction):
        rows = [make_transaction(), make_transaction(description='Lunch')]
        assert filter_transactions(rows, '') == rows
        assert filter_transactions(rows, None) == rows

    def test_matches_description_case_insensitive(self, make_transaction):
        lunch = make_transaction(description='Team LUNCH')
        make_transaction(description='Taxi')

        assert filter_transactions([lunch], 'lunch') == [lunch]

    def test_matches_category_name(self, make_transaction, other_category):
        salary = make_transaction(category=other_category, description=None)
        groceries = make_transaction(description='Milk')

        result = filter_transactions([salary, groceries], 'SAL')

        assert result == [salary]

    def test_missing_description_does_not_match_text(self, make_transaction):
        tx = make_transaction(description=None)
        assert filter_transactions([tx], 'milk') == []

    def test_keeps_original_order(self, make_transaction):
        a = make_transaction(description='coffee beans')
        b = make_transaction(description='iced coffee')
        assert filter_transactions([b, a], 'coffee') == [b, a]


@pytest.mark.django_db
class TestExportTransactions:
    def test_workbook_contents(self, make_transaction):
        make_transaction(type='income', amount=Decimal('300.00'), description='Invoice #1')
        make_transaction(type='expense', amount=Decimal('45.10'))
        rows = Transaction.objects.with_relations().latest_first()

        output = export_transactions_to_excel(rows)
        ws = openpyxl.load_workbook(output).active

        values = list(ws.iter_rows(values_only=True))
        assert list(values[0]) == EXPORT_HEADERS
        assert len(values) == 3
        amounts = sorted(row[5] for row in values[1:])
        assert amounts == [-45.10, 300.00]
        descriptions = {row[4] for row in values[1:]}
        assert 'Invoice #1' in descriptions

    def test_empty_export_has_only_header(self):
        output = export_transactions_to_excel([])
        ws = openpyxl.load_workbook(output).active

        assert ws.max_row == 1

    def test_export_filename(self):
        assert export_filename(datetime(2026, 1, 8, 9, 5, 3)) == 'transactions_20260108_090503.xlsx'
