"""
Test configuration for gym server.
"""
import os

import pytest
from rest_framework.test import APIClient


def pytest_configure():
    """Point Django at the test settings."""
    os.environ.setdefault('ENVIRONMENT', 'test')
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'gym_server.settings.test')


@pytest.fixture
def api_client():
    """Unauthenticated DRF client."""
    return APIClient()


@pytest.fixture
def customer(db):
    """Provisioned member whose first login is still pending."""
    from tests.factories import CustomerFactory
    return CustomerFactory()


@pytest.fixture
def activated_customer(db):
    """Member who has already changed the initial password."""
    from tests.factories import ActivatedCustomerFactory
    return ActivatedCustomerFactory()


@pytest.fixture
def member_client(customer):
    """Client carrying a member session token for `customer`."""
    from apps.members.tokens import issue_member_token
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {issue_member_token(customer)}')
    return client


@pytest.fixture
def staff_user(db):
    from tests.factories import StaffUserFactory
    return StaffUserFactory()


@pytest.fixture
def staff_client(staff_user):
    """Client authenticated as gym staff."""
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client


@pytest.fixture
def today():
    """Calendar day the server evaluates membership status against."""
    from apps.membership.services import MembershipService
    return MembershipService.today()
