from ..schemas import CourseCreate, CourseUpdate
from .crud import create_resource_blueprint

SEARCH_FIELDS = ('name', 'description')


def enrolled_student_count(database, course):
    """Students reference a course informally, by its id or by its name."""
    references = [str(course['_id']), course['name']]
    return database.students.count({'course': {'$in': references}})


def create_courses_blueprint(database, logger):

    def block_if_enrolled(course):
        # Read-then-delete: a student inserted after this count is not seen.
        if enrolled_student_count(database, course) > 0:
            return 'Cannot delete course with enrolled students'
        return None

    return create_resource_blueprint(
        'courses', database.courses, CourseCreate, CourseUpdate, logger,
        search_fields=SEARCH_FIELDS,
        before_delete=block_if_enrolled
    )
