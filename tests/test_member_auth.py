"""
Tests for member login and the first-login password change flow.
"""
import bcrypt
import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from apps.members.models import Customer
from apps.members.tokens import issue_member_token
from tests.factories import CustomerFactory, DEFAULT_TEST_PASSWORD


def login(client, member_id, password):
    return client.post(
        reverse('member-login'),
        {'memberId': member_id, 'password': password},
        format='json',
    )


def change_password(client, current, new):
    return client.put(
        reverse('member-change-password'),
        {'currentPassword': current, 'newPassword': new},
        format='json',
    )


@pytest.mark.django_db
class TestMemberLogin:

    def test_login_returns_token_and_profile(self, api_client, customer):
        response = login(api_client, customer.member_id, DEFAULT_TEST_PASSWORD)

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body['code'] == 200
        assert body['msg'] == 'Login successful'
        assert body['data']['token']
        assert body['data']['isFirstLogin'] is True
        assert body['data']['customer']['memberId'] == customer.member_id

    def test_login_sets_last_login_but_not_first_login_flag(self, api_client, customer):
        assert customer.last_login is None

        login(api_client, customer.member_id, DEFAULT_TEST_PASSWORD)
        login(api_client, customer.member_id, DEFAULT_TEST_PASSWORD)

        customer.refresh_from_db()
        assert customer.last_login is not None
        assert customer.is_first_login is True

    def test_activated_member_reports_flag_false(self, api_client, activated_customer):
        response = login(api_client, activated_customer.member_id, DEFAULT_TEST_PASSWORD)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['data']['isFirstLogin'] is False

    def test_token_carries_member_claim(self, api_client, customer):
        response = login(api_client, customer.member_id, DEFAULT_TEST_PASSWORD)
        token = AccessToken(response.json()['data']['token'])

        assert token['member_id'] == customer.pk
        assert 'user_id' not in token

    def test_password_never_in_payload(self, api_client, customer):
        response = login(api_client, customer.member_id, DEFAULT_TEST_PASSWORD)

        profile = response.json()['data']['customer']
        assert 'password' not in profile
        assert customer.password not in response.content.decode()

    def test_member_id_is_trimmed(self, api_client, customer):
        response = login(api_client, f'  {customer.member_id} ', DEFAULT_TEST_PASSWORD)
        assert response.status_code == status.HTTP_200_OK

    @pytest.mark.parametrize('payload', [
        {},
        {'memberId': 'U001'},
        {'password': '1234'},
        {'memberId': '', 'password': '1234'},
        {'memberId': 'U001', 'password': ''},
    ])
    def test_missing_fields_rejected(self, api_client, payload):
        response = api_client.post(reverse('member-login'), payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {'code': 400, 'msg': 'Please provide member ID and password'}


@pytest.mark.django_db
class TestLoginFailuresAreUniform:
    """Every credential failure answers with the same 401 body"""

    expected = {'code': 401, 'msg': 'Invalid member ID or password'}

    def test_wrong_password(self, api_client, customer):
        response = login(api_client, customer.member_id, 'wrong')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == self.expected

    def test_unknown_member(self, api_client, db):
        response = login(api_client, 'U999', DEFAULT_TEST_PASSWORD)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == self.expected

    def test_member_without_password(self, api_client, db):
        customer = CustomerFactory(password='')
        response = login(api_client, customer.member_id, DEFAULT_TEST_PASSWORD)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == self.expected

    def test_failed_login_leaves_last_login_untouched(self, api_client, customer):
        login(api_client, customer.member_id, 'wrong')

        customer.refresh_from_db()
        assert customer.last_login is None


@pytest.mark.django_db
class TestChangePassword:

    def test_first_login_activation(self, member_client, customer):
        response = change_password(member_client, DEFAULT_TEST_PASSWORD, 'newpass')

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body['msg'] == 'Password changed successfully'
        assert body['data']['token']

        customer.refresh_from_db()
        assert customer.is_first_login is False
        assert customer.check_password('newpass')
        assert not customer.check_password(DEFAULT_TEST_PASSWORD)

    def test_new_password_works_for_login(self, member_client, api_client, customer):
        change_password(member_client, DEFAULT_TEST_PASSWORD, 'newpass')

        assert login(api_client, customer.member_id, DEFAULT_TEST_PASSWORD).status_code == 401
        response = login(api_client, customer.member_id, 'newpass')
        assert response.status_code == status.HTTP_200_OK
        assert response.json()['data']['isFirstLogin'] is False

    def test_returned_token_is_usable(self, member_client, customer):
        token = change_password(member_client, DEFAULT_TEST_PASSWORD, 'newpass').json()['data']['token']

        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {token}')
        response = client.get(reverse('member-me'))

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['data']['customer']['isFirstLogin'] is False

    def test_short_password_rejected(self, member_client, customer):
        response = change_password(member_client, DEFAULT_TEST_PASSWORD, 'abc')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['msg'] == 'Password must be at least 4 characters'

        customer.refresh_from_db()
        assert customer.is_first_login is True
        assert customer.check_password(DEFAULT_TEST_PASSWORD)

    def test_wrong_current_password(self, member_client, customer):
        response = change_password(member_client, 'nope', 'newpass')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()['msg'] == 'Current password is incorrect'

        customer.refresh_from_db()
        assert customer.is_first_login is True

    @pytest.mark.parametrize('payload', [
        {},
        {'currentPassword': '1234'},
        {'newPassword': 'newpass'},
    ])
    def test_missing_fields_rejected(self, member_client, payload):
        response = member_client.put(reverse('member-change-password'), payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['msg'] == 'Please provide current and new password'

    def test_flag_never_returns_to_true(self, member_client, customer):
        change_password(member_client, DEFAULT_TEST_PASSWORD, 'second')
        change_password(member_client, 'second', 'third')

        customer.refresh_from_db()
        assert customer.is_first_login is False
        assert customer.check_password('third')

    def test_deleted_member(self, member_client, customer):
        Customer.objects.filter(pk=customer.pk).delete()

        response = change_password(member_client, DEFAULT_TEST_PASSWORD, 'newpass')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()['msg'] == 'Member not found'


@pytest.mark.django_db
class TestMemberTokenRequired:

    @pytest.mark.parametrize('url_name', [
        'member-me', 'member-attendance', 'member-payments', 'membership-status',
    ])
    def test_no_token(self, api_client, url_name):
        response = api_client.get(reverse(url_name))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()['code'] == 401

    def test_garbage_token(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION='Bearer not-a-token')
        response = api_client.get(reverse('member-me'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_staff_token_rejected(self, api_client, staff_user):
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {AccessToken.for_user(staff_user)}')
        response = api_client.get(reverse('member-me'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_member_token_rejected_on_staff_endpoint(self, api_client, customer):
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_member_token(customer)}')
        response = api_client.get(reverse('analytics-dashboard'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
class TestNonTextCredentials:
    """Credentials must arrive as JSON strings"""

    @pytest.mark.parametrize('payload', [
        {'memberId': 'U001', 'password': ['1', '2']},
        {'memberId': 'U001', 'password': 1234},
        {'memberId': ['U001'], 'password': '1234'},
        {'memberId': {'$ne': ''}, 'password': '1234'},
    ])
    def test_login_rejects_non_text(self, api_client, customer, payload):
        response = api_client.post(reverse('member-login'), payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {'code': 400, 'msg': 'Member ID and password must be text'}
        customer.refresh_from_db()
        assert customer.last_login is None

    @pytest.mark.parametrize('payload', [
        {'currentPassword': '1234', 'newPassword': ['a', 'b']},
        {'currentPassword': '1234', 'newPassword': {'value': 'abcd'}},
        {'currentPassword': '1234', 'newPassword': 56789},
        {'currentPassword': 1234, 'newPassword': 'abcd'},
    ])
    def test_change_password_rejects_non_text(self, member_client, customer, payload):
        response = member_client.put(reverse('member-change-password'), payload, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['msg'] == 'Current and new password must be text'

        customer.refresh_from_db()
        assert customer.is_first_login is True
        assert customer.check_password(DEFAULT_TEST_PASSWORD)


@pytest.fixture
def bcrypt_member_hasher(settings):
    """Member passwords hashed with bcrypt, as in production"""
    settings.MEMBER_PASSWORD_HASHER = 'apps.common.password_utils.BCryptPasswordHasher'
    settings.PASSWORD_SECURITY_CONFIG = {'BCRYPT_ROUNDS': 4}


@pytest.mark.django_db
@pytest.mark.usefixtures('bcrypt_member_hasher')
class TestBCryptMemberPasswords:

    def test_login_and_change_password(self, api_client):
        customer = CustomerFactory()
        assert customer.password.startswith('$2b$')

        response = login(api_client, customer.member_id, DEFAULT_TEST_PASSWORD)
        assert response.status_code == status.HTTP_200_OK

        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.json()['data']['token']}")
        assert change_password(client, DEFAULT_TEST_PASSWORD, 'newpass').status_code == status.HTTP_200_OK

        assert login(api_client, customer.member_id, 'newpass').status_code == status.HTTP_200_OK
        assert login(api_client, customer.member_id, DEFAULT_TEST_PASSWORD).status_code == 401

    def test_password_longer_than_bcrypt_limit(self, api_client):
        customer = CustomerFactory()
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_member_token(customer)}')
        long_password = 'x' * 80

        response = change_password(client, DEFAULT_TEST_PASSWORD, long_password)

        assert response.status_code == status.HTTP_200_OK
        customer.refresh_from_db()
        assert customer.is_first_login is False
        assert login(api_client, customer.member_id, long_password).status_code == status.HTTP_200_OK

    def test_existing_digest_of_truncated_password(self, api_client):
        digest = bcrypt.hashpw(b'y' * 72, bcrypt.gensalt(rounds=4)).decode('ascii')
        customer = CustomerFactory(password=digest.replace('$2b$', '$2a$', 1))

        assert login(api_client, customer.member_id, 'y' * 90).status_code == status.HTTP_200_OK
        assert login(api_client, customer.member_id, 'y' * 71).status_code == status.HTTP_401_UNAUTHORIZED
