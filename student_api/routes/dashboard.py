import math
import traceback

from flask import Blueprint, jsonify

from ..schemas import serialize_document


def success_rate(graduates, total_students):
    """Percentage of graduates, rounded half up; 0 when there are no students."""
    if total_students <= 0:
        return 0
    return math.floor((graduates / total_students) * 100 + 0.5)


def collect_stats(database):
    # Independent reads; counts are not a consistent snapshot under concurrent writes.
    total_students = database.students.count()
    active_students = database.students.count({'status': 'active'})
    total_courses = database.courses.count()
    active_courses = database.courses.count({'status': 'active'})
    graduates = database.students.count({'status': 'inactive'})
    course_counts = database.students.group_counts('course')
    total_teachers = database.teachers.count()
    active_teachers = database.teachers.count({'status': 'active'})

    return {
        'totalStudents': total_students,
        'activeStudents': active_students,
        'totalCourses': total_courses,
        'activeCourses': active_courses,
        'totalTeachers': total_teachers,
        'activeTeachers': active_teachers,
        'graduates': graduates,
        'courseCounts': serialize_document(course_counts),
        'successRate': success_rate(graduates, total_students)
    }


def create_dashboard_blueprint(database, logger):
    bp = Blueprint('dashboard', __name__, url_prefix='/api/dashboard')

    @bp.route('/stats', methods=['GET'])
    def get_dashboard_stats():
        try:
            stats = collect_stats(database)
            logger.info("Dashboard stats computed", extra={'context': {'totalStudents': stats['totalStudents']}})
            return jsonify(stats)

        except Exception as e:
            logger.error(f"Dashboard stats error: {e}")
            logger.error(traceback.format_exc())
            return jsonify({'message': 'Failed to load dashboard statistics'}), 500

    return bp
