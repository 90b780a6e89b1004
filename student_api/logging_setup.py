import json
import logging
import os
from datetime import datetime, timezone

LOGGER_NAME = 'student_api'
CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class JsonFormatter(logging.Formatter):
    """One JSON object per line, for the persistent log files."""

    def format(self, record):
        entry = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname.lower(),
            'logger': record.name,
            'message': record.getMessage(),
        }
        for key in ('request', 'context'):
            payload = getattr(record, key, None)
            if payload is not None:
                entry[key] = payload
        if record.exc_info:
            entry['stack'] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(config):
    """Build the application logger: console always, error/combined files when LOG_DIR is set."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, str(config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)

    log_dir = config.get('LOG_DIR')
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

        error_file = logging.FileHandler(os.path.join(log_dir, 'error.log'), encoding='utf-8')
        error_file.setLevel(logging.ERROR)
        error_file.setFormatter(JsonFormatter())
        logger.addHandler(error_file)

        combined_file = logging.FileHandler(os.path.join(log_dir, 'combined.log'), encoding='utf-8')
        combined_file.setFormatter(JsonFormatter())
        logger.addHandler(combined_file)

    return logger
