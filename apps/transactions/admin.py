from django.contrib import admin
from django.utils.html import format_html

from .models import Transaction


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
    """
    거래 내역 관리
    """
    list_display = [
        'transaction_date',
        'get_type_display_colored',
        'get_amount_display',
        'category',
        'payment_mode',
        'description',
        'created_on',
    ]

    date_hierarchy = 'transaction_date'

    list_filter = [
        'type',
        'category',
        'payment_mode',
    ]

    search_fields = ['description', 'category__name']
    list_select_related = ['category', 'payment_mode']

    @admin.display(description='Type', ordering='type')
    def get_type_display_colored(self, obj):
        if obj.is_income:
            return format_html('<span style="color:green; font-weight:bold;">{}</span>', 'Income')
        return format_html('<span style="color:red; font-weight:bold;">{}</span>', 'Expense')

    @admin.display(description='Amount', ordering='amount')
    def get_amount_display(self, obj):
        color = 'green' if obj.is_income else 'red'
        return format_html('<span style="color:{};">{}</span>', color, obj.signed_amount)
