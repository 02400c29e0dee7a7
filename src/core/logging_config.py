import logging
import sys
from datetime import datetime, timezone

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "personality-quiz-engine"
LOG_FORMAT = '%(level)s %(logger)s %(lineno)d %(message)s'


class QuizJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON log lines for the quiz service.

    Every line carries a UTC ISO timestamp, the level, the emitting logger and
    the service name. Fields passed through ``extra`` (``quiz_id``,
    ``personality_type`` on submissions) are merged in as top-level keys.
    """

    def add_fields(self, log_record, record, message_dict):
        super(QuizJsonFormatter, self).add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['service'] = SERVICE_NAME


def _has_json_handler(root_logger: logging.Logger) -> bool:
    return any(isinstance(h.formatter, QuizJsonFormatter) for h in root_logger.handlers)


def setup_logging(log_level_str: str = "INFO"):
    """Attaches the JSON handler to the root logger once; later calls only change the level."""
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if _has_json_handler(root_logger):
        root_logger.debug(f"JSON logging already configured, level now {logging.getLevelName(log_level)}")
        return

    log_handler = logging.StreamHandler(sys.stdout)
    log_handler.setFormatter(QuizJsonFormatter(LOG_FORMAT))
    root_logger.addHandler(log_handler)
    root_logger.info(f"JSON logging configured for {SERVICE_NAME} at level {logging.getLevelName(log_level)}")
