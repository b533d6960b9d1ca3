import pytest
from django.urls import reverse


@pytest.mark.django_db
class TestLogin:
    def test_login_page_renders(self, client):
        response = client.get(reverse('accounts:login'))
        assert response.status_code == 200

    def test_login_redirects_to_dashboard(self, client, test_user):
        response = client.post(reverse('accounts:login'), {
            'username': 'tester',
            'password': 'pass12345',
        })

        assert response.status_code == 302
        assert response.url == reverse('dashboard:dashboard')

    def test_wrong_password(self, client, test_user):
        response = client.post(reverse('accounts:login'), {
            'username': 'tester',
            'password': 'wrong',
        })

        assert response.status_code == 200
        assert not response.wsgi_request.user.is_authenticated

    def test_authenticated_user_redirected(self, client, test_user):
        client.login(username='tester', password='pass12345')

        response = client.get(reverse('accounts:login'))

        assert response.status_code == 302

    def test_logout(self, client, test_user):
        client.login(username='tester', password='pass12345')

        response = client.post(reverse('accounts:logout'))

        assert response.status_code == 302
        assert response.url == reverse('accounts:login')
        response = client.get(reverse('dashboard:dashboard'))
        assert response.status_code == 302
