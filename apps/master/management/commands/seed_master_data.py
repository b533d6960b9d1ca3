from django.core.management.base import BaseCommand

from apps.master.models import Category, PaymentMode

DEFAULT_CATEGORIES = [
    'Salary',
    'Sales',
    'Rent',
    'Utilities',
    'Groceries',
    'Travel',
    'Office Supplies',
    'Miscellaneous',
]

DEFAULT_PAYMENT_MODES = [
    'Cash',
    'Bank Transfer',
    'Credit Card',
    'Debit Card',
    'UPI',
]


class Command(BaseCommand):
    help = '기본 카테고리/결제 수단 데이터 생성'

    def handle(self, *args, **kwargs):
        created = 0
        existing = 0

        for name in DEFAULT_CATEGORIES:
            _, created_flag = Category.objects.get_or_create(name__iexact=name, defaults={'name': name})
            if created_flag:
                created += 1
            else:
                existing += 1

        for mode in DEFAULT_PAYMENT_MODES:
            _, created_flag = PaymentMode.objects.get_or_create(mode__iexact=mode, defaults={'mode': mode})
            if created_flag:
                created += 1
            else:
                existing += 1

        self.stdout.write(
            self.style.SUCCESS(f'Master data seeded: {created} created, {existing} already present')
        )
