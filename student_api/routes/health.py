import platform
import sys
import time
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify

from ..schemas import format_datetime


def uptime_seconds():
    return time.monotonic() - current_app.config['STARTED_AT']


def format_uptime(seconds):
    days, remainder = divmod(int(seconds), 3600 * 24)
    hours, remainder = divmod(remainder, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{days}d {hours}h {minutes}m {secs}s"


def memory_usage():
    """Current and peak resident set size of this process, in MB."""
    import resource

    peak_kb = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    if sys.platform == 'darwin':
        peak_kb //= 1024

    used_kb = peak_kb
    try:
        with open('/proc/self/statm') as statm:
            resident_pages = int(statm.read().split()[1])
        used_kb = resident_pages * resource.getpagesize() // 1024
    except OSError:
        pass

    return {
        'used': round(used_kb / 1024),
        'total': round(peak_kb / 1024),
        'unit': 'MB'
    }


def create_health_blueprint(database, logger):
    bp = Blueprint('health', __name__)

    @bp.route('/health', methods=['GET'])
    def health_check():
        return jsonify({
            'status': 'UP',
            'timestamp': format_datetime(datetime.now(timezone.utc)),
            'uptime': uptime_seconds(),
            'environment': current_app.config['APP_ENV']
        })

    @bp.route('/health/detailed', methods=['GET'])
    def detailed_health_check():
        try:
            db_status = 'Connected' if database.is_connected() else 'Disconnected'
            seconds = round(uptime_seconds())

            return jsonify({
                'status': 'UP',
                'timestamp': format_datetime(datetime.now(timezone.utc)),
                'database': {'status': db_status},
                'system': {
                    'memory': memory_usage(),
                    'uptime': {'seconds': seconds, 'formatted': format_uptime(seconds)},
                    'pythonVersion': platform.python_version(),
                    'platform': sys.platform
                },
                'environment': current_app.config['APP_ENV']
            })

        except Exception as e:
            logger.error(f"Health check error: {e}")
            return jsonify({'status': 'DOWN', 'error': str(e)}), 500

    return bp
