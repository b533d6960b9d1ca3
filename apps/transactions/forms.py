from datetime import date

from django import forms
from django.core.exceptions import ValidationError
from django.utils import timezone

from apps.master.models import Category, PaymentMode
from .models import Transaction

# 달력에서 선택 가능한 가장 이른 날짜
EARLIEST_TRANSACTION_DATE = date(1900, 1, 1)

AMOUNT_ERROR = 'Please enter a valid amount'


class TransactionForm(forms.ModelForm):
    """거래 입력 폼"""

    category = forms.ModelChoiceField(
        queryset=Category.objects.order_by('name'),
        label='Category',
        empty_label='Select Category',
        error_messages={
            'required': 'Please select a category',
            'invalid_choice': 'Please select a category',
        },
    )
    payment_mode = forms.ModelChoiceField(
        queryset=PaymentMode.objects.order_by('mode'),
        label='Payment Mode',
        empty_label='Select Mode',
        error_messages={
            'required': 'Please select a payment mode',
            'invalid_choice': 'Please select a payment mode',
        },
    )

    class Meta:
        model = Transaction
        fields = ['transaction_date', 'type', 'amount', 'category', 'payment_mode', 'description']
        widgets = {
            'transaction_date': forms.DateInput(attrs={'type': 'date'}, format='%Y-%m-%d'),
            'type': forms.RadioSelect,
            'amount': forms.NumberInput(attrs={'step': '0.01', 'min': '0', 'placeholder': '0.00'}),
            'description': forms.TextInput(attrs={'placeholder': 'What was this for?'}),
        }
        labels = {
            'transaction_date': 'Date',
            'type': 'Type',
            'amount': 'Amount',
            'description': 'Description (Optional)',
        }
        error_messages = {
            'type': {
                'invalid_choice': 'Please select income or expense',
            },
            'transaction_date': {
                'required': 'Please select a date',
                'invalid': 'Please select a date',
            },
            'amount': {
                'required': AMOUNT_ERROR,
                'invalid': AMOUNT_ERROR,
                'max_digits': AMOUNT_ERROR,
                'max_decimal_places': AMOUNT_ERROR,
                'max_whole_digits': AMOUNT_ERROR,
            },
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['type'].required = False
        self.fields['type'].choices = Transaction.TYPE_CHOICES
        self.fields['description'].required = False

        # 유효성 검사 실패 시 필드 강조 표시
        if self.is_bound and self.errors:
            for field_name in self.errors:
                field = self.fields.get(field_name)
                if not field:
                    continue
                existing = field.widget.attrs.get('class', '')
                if 'is-invalid' not in existing:
                    field.widget.attrs['class'] = f"{existing} is-invalid".strip()

    def clean_transaction_date(self):
        value = self.cleaned_data.get('transaction_date')
        if value is None:
            raise ValidationError('Please select a date')
        if value > timezone.localdate():
            raise ValidationError('Date cannot be in the future')
        if value < EARLIEST_TRANSACTION_DATE:
            raise ValidationError('Date must be on or after 1900-01-01')
        return value

    def clean_type(self):
        # 선택하지 않으면 지출로 간주
        return self.cleaned_data.get('type') or Transaction.TYPE_EXPENSE

    def clean_amount(self):
        amount = self.cleaned_data.get('amount')
        if amount is None or amount <= 0:
            raise ValidationError(AMOUNT_ERROR)
        return amount

    def clean_description(self):
        description = (self.cleaned_data.get('description') or '').strip()
        return description or None

    def first_error(self):
        """필드 순서대로 첫 번째 오류 메시지 (알림용)"""
        for errors in self.errors.values():
            if errors:
                return errors[0]
        return None

    def get_defaults(self):
        """다음 입력에 유지할 값 (날짜, 유형, 카테고리, 결제 수단)"""
        data = self.cleaned_data
        return {
            'transaction_date': data['transaction_date'].isoformat(),
            'type': data['type'],
            'category': data['category'].pk,
            'payment_mode': data['payment_mode'].pk,
        }
