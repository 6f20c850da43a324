import pytest
from django.contrib.auth.models import User

from todocal.api.models import Task


@pytest.fixture(autouse=True)
def _test_settings(settings):
    settings.TIME_ZONE = 'UTC'
    settings.PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']


@pytest.fixture
def user(db):
    return User.objects.create_user(username='alice@example.com', email='alice@example.com', password='password123', first_name='Alice')


@pytest.fixture
def other_user(db):
    return User.objects.create_user(username='bob@example.com', email='bob@example.com', password='password123', first_name='Bob')


@pytest.fixture
def auth_client(client, user):
    client.force_login(user)
    return client


@pytest.fixture
def make_task(user):
    def _make(owner=None, **fields):
        fields.setdefault('title', 'Water the plants')
        t = Task(user=owner or user, **fields)
        t.save()
        return t
    return _make