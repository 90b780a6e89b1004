import traceback

from flask import jsonify, request
from werkzeug.exceptions import HTTPException


def register_error_handlers(app, logger):
    """JSON bodies for HTTP errors, plus a last line of defense for anything uncaught."""

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            'message': 'Resource not found',
            'path': request.path,
            'method': request.method
        }), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({
            'message': f'Method {request.method} not allowed for {request.path}'
        }), 405

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify({
            'message': error.description or 'Invalid request parameters'
        }), 400

    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({'message': error.description}), error.code

    @app.errorhandler(Exception)
    def internal_error(error):
        logger.error(
            f"Unhandled error: {error}",
            extra={'context': {
                'message': str(error),
                'stack': traceback.format_exc(),
                'method': request.method,
                'path': request.path,
                'body': request.get_json(silent=True),
            }}
        )
        return jsonify({'message': 'Internal server error'}), 500
