"""
accounts 앱 테스트용 공통 fixture
"""
import pytest
from django.contrib.auth.models import User


@pytest.fixture
def test_user(db):
    return User.objects.create_user(username='tester', password='pass12345')
