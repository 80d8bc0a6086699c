"""
Tests for member profile, membership status and push subscription endpoints.
"""
from datetime import timedelta

import pytest
from django.urls import reverse
from rest_framework import status

from apps.members.models import Customer


@pytest.mark.django_db
class TestMemberProfile:

    def test_me_returns_profile_with_status(self, member_client, customer, today):
        response = member_client.get(reverse('member-me'))

        assert response.status_code == status.HTTP_200_OK
        profile = response.json()['data']['customer']
        assert profile['memberId'] == customer.member_id
        assert profile['name'] == customer.name
        assert profile['validity'] == customer.validity.isoformat()
        assert profile['isFirstLogin'] is True
        assert profile['membershipStatus'] == {
            'daysRemaining': (customer.validity - today).days,
            'text': 'Active',
            'class': 'active',
        }
        assert 'password' not in profile

    def test_me_for_deleted_member(self, member_client, customer):
        Customer.objects.filter(pk=customer.pk).delete()

        response = member_client.get(reverse('member-me'))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {'code': 404, 'msg': 'Member not found'}

    def test_update_single_field(self, member_client, customer):
        original_name = customer.name

        response = member_client.put(reverse('member-profile'), {'phone': '9000000001'}, format='json')

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['msg'] == 'Profile updated successfully'
        customer.refresh_from_db()
        assert customer.phone == '9000000001'
        assert customer.name == original_name

    def test_update_all_fields(self, member_client, customer):
        payload = {
            'name': 'Asha Rao',
            'phone': '9000000002',
            'email': 'asha@example.com',
            'photo': '/uploads/asha.jpg',
        }

        response = member_client.put(reverse('member-profile'), payload, format='json')

        profile = response.json()['data']['customer']
        assert profile['name'] == 'Asha Rao'
        assert profile['email'] == 'asha@example.com'
        assert profile['photo'] == '/uploads/asha.jpg'

    def test_empty_values_leave_fields_unchanged(self, member_client, customer):
        before = (customer.name, customer.phone, customer.email)

        response = member_client.put(
            reverse('member-profile'),
            {'name': '', 'phone': None, 'email': ''},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        customer.refresh_from_db()
        assert (customer.name, customer.phone, customer.email) == before

    def test_other_fields_ignored(self, member_client, customer):
        original_validity = customer.validity

        member_client.put(
            reverse('member-profile'),
            {'validity': '2099-01-01', 'plan': '12 months', 'isFirstLogin': False},
            format='json',
        )

        customer.refresh_from_db()
        assert customer.validity == original_validity
        assert customer.plan == '3 months'
        assert customer.is_first_login is True

    def test_invalid_email_rejected(self, member_client, customer):
        response = member_client.put(reverse('member-profile'), {'email': 'not-an-email'}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body['msg'] == 'Profile update failed'
        assert 'email' in body['errors']


@pytest.mark.django_db
class TestMembershipStatusEndpoint:

    def test_expiring_member(self, member_client, customer, today):
        customer.validity = today + timedelta(days=3)
        customer.save()

        response = member_client.get(reverse('membership-status'))

        assert response.status_code == status.HTTP_200_OK
        data = response.json()['data']
        assert data['status'] == {'daysRemaining': 3, 'text': 'Expiring Soon', 'class': 'expiring'}
        assert data['validity'] == customer.validity.isoformat()

    def test_expired_member_can_still_read_status(self, member_client, customer, today):
        customer.validity = today - timedelta(days=10)
        customer.save()

        response = member_client.get(reverse('membership-status'))

        assert response.json()['data']['status'] == {'daysRemaining': 0, 'text': 'Expired', 'class': 'expired'}


@pytest.mark.django_db
class TestPushSubscription:

    def test_subscribe_stores_subscription(self, member_client, customer):
        subscription = {'endpoint': 'https://push.example.com/abc', 'keys': {'p256dh': 'x', 'auth': 'y'}}

        response = member_client.post(
            reverse('member-subscribe-push'), {'subscription': subscription}, format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        customer.refresh_from_db()
        assert customer.push_subscription == subscription

    def test_missing_subscription(self, member_client):
        response = member_client.post(reverse('member-subscribe-push'), {}, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['msg'] == 'Push subscription data required'
