"""
프로젝트 공통 추상 모델

- TimeStampedModel: 생성/수정 시간 자동 추적 (created_on / updated_on)
"""

from django.db import models


class TimeStampedModel(models.Model):
    """생성/수정 시간 자동 추적"""

    created_on = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_on = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
