from ..schemas import StudentCreate, StudentUpdate
from .crud import create_resource_blueprint

SEARCH_FIELDS = ('name', 'email', 'course')


def create_students_blueprint(database, logger):
    return create_resource_blueprint(
        'students', database.students, StudentCreate, StudentUpdate, logger,
        search_fields=SEARCH_FIELDS
    )
