import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from frontdesk.models import User


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def staff_user(db):
    return User.objects.create_user(username='staff@example.com', email='staff@example.com',
                                    password='P@ssw0rd1', role='staff', full_name='Front Desk')


@pytest.fixture
def api(staff_user):
    client = APIClient()
    client.force_authenticate(user=staff_user)
    return client
