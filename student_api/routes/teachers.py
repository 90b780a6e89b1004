from ..schemas import TeacherCreate, TeacherUpdate
from .crud import create_resource_blueprint

SEARCH_FIELDS = ('name', 'email', 'subject')


def create_teachers_blueprint(database, logger):
    return create_resource_blueprint(
        'teachers', database.teachers, TeacherCreate, TeacherUpdate, logger,
        search_fields=SEARCH_FIELDS
    )
