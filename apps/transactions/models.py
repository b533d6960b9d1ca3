from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from apps.core.models import TimeStampedModel
from apps.master.models import Category, PaymentMode


class TransactionQuerySet(models.QuerySet):
    """Transaction 전용 QuerySet (헬퍼 메서드)"""
    def income(self): return self.filter(type=Transaction.TYPE_INCOME)
    def expense(self): return self.filter(type=Transaction.TYPE_EXPENSE)
    def with_relations(self): return self.select_related('category', 'payment_mode')

    def latest_first(self):
        """거래일 내림차순, 같은 날은 등록 시각 내림차순"""
        return self.order_by('-transaction_date', '-created_on')

    def recent(self, limit):
        """목록 화면용: 관계 조인 + 정렬 + 건수 제한"""
        return self.with_relations().latest_first()[:limit]


class Transaction(TimeStampedModel):
    """거래 내역 (핵심 모델)"""
    TYPE_INCOME = 'income'
    TYPE_EXPENSE = 'expense'
    TYPE_CHOICES = [(TYPE_INCOME, 'Income'), (TYPE_EXPENSE, 'Expense')]

    transaction_date = models.DateField(db_index=True)
    amount = models.DecimalField(max_digits=15, decimal_places=2, validators=[MinValueValidator(Decimal('0.01'))])
    type = models.CharField(max_length=10, choices=TYPE_CHOICES, default=TYPE_EXPENSE, db_index=True)
    category = models.ForeignKey(Category, on_delete=models.PROTECT, related_name='transactions')
    payment_mode = models.ForeignKey(PaymentMode, on_delete=models.PROTECT, related_name='transactions')
    description = models.TextField(null=True, blank=True)

    objects = TransactionQuerySet.as_manager()

    class Meta:
        db_table = 'transactions'
        ordering = ['-transaction_date', '-created_on']
        indexes = [
            models.Index(fields=['-transaction_date', '-created_on'], name='tx_date_created_idx'),
            models.Index(fields=['type', '-transaction_date'], name='tx_type_date_idx'),
        ]
        constraints = [
            models.CheckConstraint(condition=models.Q(amount__gt=0), name='transaction_amount_positive'),
            models.CheckConstraint(
                condition=models.Q(type__in=['income', 'expense']),
                name='transaction_type_valid'
            ),
        ]

    def __str__(self):
        return f"{self.get_type_display()} {self.signed_amount} ({self.transaction_date})"

    @property
    def is_income(self):
        return self.type == self.TYPE_INCOME

    @property
    def signed_amount(self):
        """수입은 +, 지출은 - 부호를 붙인 소수점 2자리 문자열"""
        sign = '+' if self.is_income else '-'
        return f"{sign}{Decimal(self.amount):.2f}"
