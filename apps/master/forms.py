from django import forms
from django.core.exceptions import ValidationError

from .models import Category, PaymentMode


class MasterNameFormMixin:
    """이름 필드 공통 검증 (공백 제거 + 대소문자 무시 중복 체크)"""

    name_field = None
    duplicate_message = None

    def clean_name_value(self):
        value = (self.cleaned_data.get(self.name_field) or '').strip()
        if not value:
            raise ValidationError('This field is required.')

        duplicates = self._meta.model.objects.filter(**{f'{self.name_field}__iexact': value})
        if self.instance.pk:
            duplicates = duplicates.exclude(pk=self.instance.pk)
        if duplicates.exists():
            raise ValidationError(self.duplicate_message.format(value=value))
        return value


class CategoryForm(MasterNameFormMixin, forms.ModelForm):
    """카테고리 입력/수정 폼"""

    name_field = 'name'
    duplicate_message = "A category named '{value}' already exists."

    class Meta:
        model = Category
        fields = ['name']
        widgets = {
            'name': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'Category name'}),
        }
        labels = {
            'name': 'Name',
        }

    def clean_name(self):
        return self.clean_name_value()


class PaymentModeForm(MasterNameFormMixin, forms.ModelForm):
    """결제 수단 입력/수정 폼"""

    name_field = 'mode'
    duplicate_message = "A payment mode named '{value}' already exists."

    class Meta:
        model = PaymentMode
        fields = ['mode']
        widgets = {
            'mode': forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'e.g. Cash'}),
        }
        labels = {
            'mode': 'Mode',
        }

    def clean_mode(self):
        return self.clean_name_value()
