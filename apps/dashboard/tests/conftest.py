"""
dashboard 앱 테스트용 공통 fixture
"""
import pytest
from django.contrib.auth.models import User


@pytest.fixture
def test_user(db):
    return User.objects.create_user(
        username='tester', password='pass', email='jane.doe@example.com'
    )


@pytest.fixture
def auth_client(client, test_user):
    client.login(username='tester', password='pass')
    return client
