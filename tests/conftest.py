import pytest

from fakes import FakeConnection


@pytest.fixture
def fake_conn():
    return FakeConnection()


@pytest.fixture
def db_env():
    return {
        'DB_HOST': 'db.local',
        'DB_PORT': '5432',
        'DB_USER': 'metrics',
        'DB_PASSWORD': 's3cret',
        'DB_NAME': 'telemetry',
    }
