import logging

import mongomock
import pytest

from student_api import create_app
from student_api.database import Database

TEST_LOGGER = 'tests.student_api'


@pytest.fixture
def database():
    client = mongomock.MongoClient()
    db = Database(client, 'student-management-test')
    yield db
    db.close()


@pytest.fixture
def frontend_dir(tmp_path):
    return tmp_path / 'frontend'


@pytest.fixture
def build_app(database, frontend_dir):
    def _build():
        return create_app(
            overrides={
                'TESTING': True,
                'APP_ENV': 'test',
                'LOG_DIR': '',
                'FRONTEND_DIR': str(frontend_dir),
            },
            database=database,
            logger=logging.getLogger(TEST_LOGGER)
        )
    return _build


@pytest.fixture
def app(build_app):
    yield build_app()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_student(client):
    def _make(**fields):
        payload = {'name': 'Ann', 'email': 'a@x.com', 'course': 'CS101'}
        payload.update(fields)
        response = client.post('/api/students', json=payload)
        assert response.status_code == 201, response.get_json()
        return response.get_json()
    return _make


@pytest.fixture
def make_course(client):
    def _make(**fields):
        payload = {'name': 'CS101', 'description': 'Intro to computing', 'duration': 12}
        payload.update(fields)
        response = client.post('/api/courses', json=payload)
        assert response.status_code == 201, response.get_json()
        return response.get_json()
    return _make
