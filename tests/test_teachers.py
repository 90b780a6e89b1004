from bson import ObjectId

TEACHER = {'name': 'Grace Hopper', 'email': 'grace@school.edu', 'subject': 'Computing'}


def test_teacher_crud_cycle(client):
    response = client.post('/api/teachers', json={**TEACHER, 'experience': 30})
    assert response.status_code == 201
    teacher = response.get_json()
    assert teacher['experience'] == 30
    assert teacher['status'] == 'active'

    assert client.get(f"/api/teachers/{teacher['_id']}").get_json() == teacher

    response = client.put(f"/api/teachers/{teacher['_id']}", json={'subject': 'Mathematics'})
    assert response.status_code == 200
    assert response.get_json()['subject'] == 'Mathematics'

    assert client.delete(f"/api/teachers/{teacher['_id']}").status_code == 200
    assert client.get(f"/api/teachers/{teacher['_id']}").status_code == 404


def test_experience_defaults_to_zero(client):
    response = client.post('/api/teachers', json=TEACHER)
    assert response.get_json()['experience'] == 0


def test_negative_experience_rejected(client):
    response = client.post('/api/teachers', json={**TEACHER, 'experience': -1})
    assert response.status_code == 400
    assert 'experience' in response.get_json()['message']


def test_teacher_email_is_unique(client):
    client.post('/api/teachers', json=TEACHER)

    response = client.post('/api/teachers', json={**TEACHER, 'name': 'Someone Else'})

    assert response.status_code == 400


def test_missing_teacher_is_not_found(client):
    response = client.get(f'/api/teachers/{ObjectId()}')
    assert response.status_code == 404
    assert response.get_json() == {'message': 'Teacher not found'}


def test_search_teachers_by_subject(client):
    client.post('/api/teachers', json=TEACHER)
    client.post('/api/teachers', json={'name': 'Ada', 'email': 'ada@school.edu', 'subject': 'Poetry'})

    response = client.get('/api/teachers/search?q=poet')

    assert [t['name'] for t in response.get_json()] == ['Ada']
