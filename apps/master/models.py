"""
기준 정보 (Master Data)

거래 입력 시 선택하는 조회용 테이블:
    - Category: 거래 카테고리 (categories)
    - PaymentMode: 결제 수단 (payment_modes)
"""

from django.db import models
from django.db.models import Count

from apps.core.models import TimeStampedModel


class MasterQuerySet(models.QuerySet):
    """사용 건수 집계 헬퍼"""

    def with_usage(self):
        return self.annotate(transaction_count=Count('transactions'))


class Category(TimeStampedModel):
    """거래 카테고리"""

    name = models.CharField(max_length=50, unique=True)

    objects = MasterQuerySet.as_manager()

    class Meta:
        db_table = 'categories'
        ordering = ['name']
        verbose_name_plural = 'categories'

    def __str__(self):
        return self.name


class PaymentMode(TimeStampedModel):
    """결제 수단 (현금, 카드, 계좌이체 등)"""

    mode = models.CharField(max_length=50, unique=True)

    objects = MasterQuerySet.as_manager()

    class Meta:
        db_table = 'payment_modes'
        ordering = ['mode']

    def __str__(self):
        return self.mode
