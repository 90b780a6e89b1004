import re

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from student_api.routes import health
from student_api.routes.health import format_uptime


class UnreachableAdmin:
    def command(self, name):
        raise ServerSelectionTimeoutError('localhost:27017: connection refused')


class UnreachableClient:
    admin = UnreachableAdmin()

    def close(self):
        pass


@pytest.fixture
def disconnected(database, monkeypatch):
    monkeypatch.setattr(database, 'client', UnreachableClient())
    return database


def test_health_is_up(client):
    response = client.get('/health')

    assert response.status_code == 200
    body = response.get_json()
    assert body['status'] == 'UP'
    assert body['environment'] == 'test'
    assert body['uptime'] >= 0
    assert body['timestamp'].endswith('Z')


def test_health_is_up_without_database(client, disconnected):
    response = client.get('/health')

    assert response.status_code == 200
    assert response.get_json()['status'] == 'UP'


def test_detailed_health_connected(client):
    response = client.get('/health/detailed')

    assert response.status_code == 200
    body = response.get_json()
    assert body['status'] == 'UP'
    assert body['database'] == {'status': 'Connected'}
    assert body['system']['memory']['unit'] == 'MB'
    assert body['system']['memory']['used'] >= 0
    assert re.fullmatch(r'\d+d \d+h \d+m \d+s', body['system']['uptime']['formatted'])
    assert body['system']['pythonVersion']
    assert body['environment'] == 'test'


def test_detailed_health_reports_disconnected(client, disconnected):
    response = client.get('/health/detailed')

    assert response.status_code == 200
    assert response.get_json()['database'] == {'status': 'Disconnected'}


def test_detailed_health_down_when_gathering_fails(client, monkeypatch):
    def broken():
        raise OSError('no /proc')

    monkeypatch.setattr(health, 'memory_usage', broken)

    response = client.get('/health/detailed')

    assert response.status_code == 500
    assert response.get_json() == {'status': 'DOWN', 'error': 'no /proc'}


@pytest.mark.parametrize('seconds, expected', [
    (0, '0d 0h 0m 0s'),
    (59, '0d 0h 0m 59s'),
    (3661, '0d 1h 1m 1s'),
    (90061, '1d 1h 1m 1s'),
])
def test_format_uptime(seconds, expected):
    assert format_uptime(seconds) == expected
