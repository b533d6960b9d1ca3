import pytest

from apps.master.forms import CategoryForm, PaymentModeForm
from apps.master.models import Category


@pytest.mark.django_db
class TestCategoryForm:
    def test_valid_and_trimmed(self):
        form = CategoryForm(data={'name': '  Rent  '})
        assert form.is_valid()
        assert form.cleaned_data['name'] == 'Rent'

    def test_blank_rejected(self):
        form = CategoryForm(data={'name': '   '})
        assert not form.is_valid()
        assert 'name' in form.errors

    def test_duplicate_case_insensitive(self, category):
        form = CategoryForm(data={'name': 'travel'})
        assert not form.is_valid()
        assert form.errors['name'] == ["A category named 'travel' already exists."]

    def test_update_same_name_allowed(self, category):
        form = CategoryForm(data={'name': 'Travel'}, instance=category)
        assert form.is_valid()

    def test_update_to_other_existing_name_rejected(self, category):
        other = Category.objects.create(name='Food')
        form = CategoryForm(data={'name': 'TRAVEL'}, instance=other)
        assert not form.is_valid()


@pytest.mark.django_db
class TestPaymentModeForm:
    def test_valid(self):
        form = PaymentModeForm(data={'mode': 'UPI'})
        assert form.is_valid()

    def test_duplicate_case_insensitive(self, payment_mode):
        form = PaymentModeForm(data={'mode': 'credit card'})
        assert not form.is_valid()
        assert form.errors['mode'] == ["A payment mode named 'credit card' already exists."]
