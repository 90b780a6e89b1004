import mongomock
import pytest
from pymongo.errors import ServerSelectionTimeoutError

STUDENT = {'name': 'Ann', 'email': 'dup@x.com', 'course': 'CS101'}


@pytest.fixture
def mongo_down_at_boot(monkeypatch):
    """create_index fails until the returned switch is flipped."""
    create_index = mongomock.Collection.create_index
    state = {'down': True}

    def flaky_create_index(self, *args, **kwargs):
        if state['down']:
            raise ServerSelectionTimeoutError('down at boot')
        return create_index(self, *args, **kwargs)

    monkeypatch.setattr(mongomock.Collection, 'create_index', flaky_create_index)
    return state


def test_unique_indexes_built_on_first_write_after_boot_failure(build_app, database, mongo_down_at_boot):
    client = build_app().test_client()
    assert database.indexes_ready is False

    mongo_down_at_boot['down'] = False

    assert client.post('/api/students', json=STUDENT).status_code == 201
    assert database.indexes_ready is True

    response = client.post('/api/students', json={**STUDENT, 'name': 'Other'})
    assert response.status_code == 400
    assert 'already exists' in response.get_json()['message']


def test_writes_refused_while_indexes_cannot_be_built(build_app, database, mongo_down_at_boot):
    client = build_app().test_client()

    response = client.post('/api/courses', json={
        'name': 'CS101', 'description': 'Intro', 'duration': 12
    })

    assert response.status_code == 500
    assert response.get_json() == {'message': 'Failed to create course'}
    assert database.courses.count() == 0


def test_indexes_ready_after_successful_startup(app, database):
    assert database.indexes_ready is True
