"""
Tests for the member attendance and payment history endpoints.
"""
from datetime import timedelta

import pytest
from django.urls import reverse
from django.utils import timezone
from rest_framework import status

from tests.factories import AttendanceFactory, CustomerFactory, PaymentFactory


def check_ins(customer, count):
    now = timezone.now()
    return [AttendanceFactory(customer=customer, timestamp=now - timedelta(days=i)) for i in range(count)]


@pytest.mark.django_db
class TestAttendanceHistory:

    def test_newest_first_with_default_limit(self, member_client, customer):
        records = check_ins(customer, 35)

        response = member_client.get(reverse('member-attendance'))

        assert response.status_code == status.HTTP_200_OK
        data = response.json()['data']
        assert data['total'] == 35
        assert data['currentPage'] == 1
        assert data['totalPages'] == 2
        assert len(data['attendance']) == 30
        assert data['attendance'][0]['id'] == records[0].id
        assert data['attendance'][-1]['id'] == records[29].id

    def test_second_page(self, member_client, customer):
        records = check_ins(customer, 5)

        response = member_client.get(reverse('member-attendance'), {'limit': 2, 'page': 3})

        data = response.json()['data']
        assert data['totalPages'] == 3
        assert data['currentPage'] == 3
        assert [row['id'] for row in data['attendance']] == [records[4].id]

    def test_page_past_end_is_empty(self, member_client, customer):
        check_ins(customer, 3)

        data = member_client.get(reverse('member-attendance'), {'page': 5}).json()['data']

        assert data['attendance'] == []
        assert data['total'] == 3

    def test_no_records(self, member_client):
        data = member_client.get(reverse('member-attendance')).json()['data']

        assert data == {'attendance': [], 'total': 0, 'currentPage': 1, 'totalPages': 0}

    def test_only_own_records(self, member_client, customer):
        check_ins(customer, 2)
        check_ins(CustomerFactory(), 4)

        data = member_client.get(reverse('member-attendance')).json()['data']

        assert data['total'] == 2

    @pytest.mark.parametrize('params', [{'limit': 0}, {'limit': 'abc'}, {'page': -1}, {'page': '1.5'}])
    def test_invalid_paging_rejected(self, member_client, params):
        response = member_client.get(reverse('member-attendance'), params)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'must be a positive integer' in response.json()['msg']

    def test_limit_is_capped(self, member_client, customer):
        check_ins(customer, 3)

        data = member_client.get(reverse('member-attendance'), {'limit': 5000}).json()['data']

        assert data['totalPages'] == 1
        assert len(data['attendance']) == 3


@pytest.mark.django_db
class TestPaymentHistory:

    def test_newest_first_with_default_limit(self, member_client, customer):
        now = timezone.now()
        payments = [PaymentFactory(customer=customer, payment_date=now - timedelta(days=30 * i)) for i in range(12)]

        response = member_client.get(reverse('member-payments'))

        data = response.json()['data']
        assert data['total'] == 12
        assert data['totalPages'] == 2
        assert len(data['payments']) == 10
        assert data['payments'][0]['id'] == payments[0].id
        assert data['payments'][0]['amount'] == '1500.00'
        assert 'paymentDate' in data['payments'][0]

    def test_custom_limit(self, member_client, customer):
        PaymentFactory.create_batch(3, customer=customer)

        data = member_client.get(reverse('member-payments'), {'limit': 1}).json()['data']

        assert len(data['payments']) == 1
        assert data['totalPages'] == 3
