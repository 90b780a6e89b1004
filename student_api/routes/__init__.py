from .courses import create_courses_blueprint
from .dashboard import create_dashboard_blueprint
from .frontend import create_frontend_blueprint
from .health import create_health_blueprint
from .students import create_students_blueprint
from .teachers import create_teachers_blueprint


def register_routes(app, database, logger):
    app.register_blueprint(create_students_blueprint(database, logger))
    app.register_blueprint(create_courses_blueprint(database, logger))
    app.register_blueprint(create_teachers_blueprint(database, logger))
    app.register_blueprint(create_dashboard_blueprint(database, logger))
    app.register_blueprint(create_health_blueprint(database, logger))
    app.register_blueprint(create_frontend_blueprint())
