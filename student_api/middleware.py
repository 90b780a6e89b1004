import time

from flask import g, request


def register_request_logging(app, logger):
    """Time every request and log its outcome once the response is ready."""

    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_and_secure(response):
        started = g.pop('request_started', None)
        duration_ms = round((time.perf_counter() - started) * 1000) if started is not None else 0

        details = {
            'method': request.method,
            'path': request.path,
            'status': response.status_code,
            'duration': f'{duration_ms}ms',
            'params': request.view_args or {},
            'query': request.args.to_dict(),
        }
        if request.method != 'GET':
            details['body'] = request.get_json(silent=True)

        logger.info(
            f"{request.method} {request.path} {response.status_code} {duration_ms}ms",
            extra={'request': details}
        )

        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['X-XSS-Protection'] = '1; mode=block'
        return response
