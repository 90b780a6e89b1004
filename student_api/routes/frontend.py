import os

from flask import Blueprint, abort, current_app, send_from_directory

BANNER = 'Student Management API is Live!'


def create_frontend_blueprint():
    """Serve the built single-page app; unknown non-API paths get index.html."""
    bp = Blueprint('frontend', __name__)

    @bp.route('/', defaults={'path': ''}, methods=['GET'])
    @bp.route('/<path:path>', methods=['GET'])
    def serve_frontend(path):
        if path == 'api' or path.startswith('api/'):
            abort(404)

        frontend_dir = current_app.config['FRONTEND_DIR']
        if path and os.path.isfile(os.path.join(frontend_dir, path)):
            return send_from_directory(frontend_dir, path)

        if os.path.isfile(os.path.join(frontend_dir, 'index.html')):
            return send_from_directory(frontend_dir, 'index.html')

        if not path:
            return BANNER, 200, {'Content-Type': 'text/plain; charset=utf-8'}
        abort(404)

    return bp
