from django.contrib import admin

from .models import Category, PaymentMode


class UsageCountAdminMixin:
    """목록에 거래 사용 건수 표시"""

    def get_queryset(self, request):
        return super().get_queryset(request).with_usage()

    @admin.display(description='Transactions', ordering='transaction_count')
    def get_transaction_count(self, obj):
        return obj.transaction_count


@admin.register(Category)
class CategoryAdmin(UsageCountAdminMixin, admin.ModelAdmin):
    list_display = ['name', 'get_transaction_count', 'created_on']
    search_fields = ['name']
    ordering = ['name']


@admin.register(PaymentMode)
class PaymentModeAdmin(UsageCountAdminMixin, admin.ModelAdmin):
    list_display = ['mode', 'get_transaction_count', 'created_on']
    search_fields = ['mode']
    ordering = ['mode']
