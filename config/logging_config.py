"""
Centralized logging configuration for the study assistant server.

This module sets up application-wide logging: one JSON line per record, written to stdout and to a
rotating log file. Every record can carry the `interaction_id` of the chat turn that produced it and
the name of the pipeline (rule_based or llm) that handled the turn, so a single turn can be followed
through the logs with a simple grep.
"""

import logging
import logging.handlers
import sys
import json
from pathlib import Path

# Attributes present on every LogRecord; anything else arrived through `extra=`.
_STANDARD_RECORD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class StructuredLogFormatter(logging.Formatter):
    """
    Formatter that renders each log record as a single JSON object.

    Features:
    - Includes interaction_id and pipeline_name if present on the record
    - Copies any other `extra=` fields (e.g. topic, mode, model) into the JSON body
    - Preserves standard log fields (timestamp, level, logger) and exception text
    """

    def format(self, record):
        log_data = {
            'timestamp': self.formatTime(record, self.datefmt),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage()
        }

        for key, value in record.__dict__.items():
            if key in _STANDARD_RECORD_ATTRS or key.startswith('_'):
                continue
            log_data[key] = value

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)

DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(interaction_id)s] - [%(pipeline_name)s] - %(message)s'
DEFAULT_LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class TurnLoggerAdapter(logging.LoggerAdapter):
    """
    LoggerAdapter that merges its context into per-call `extra` instead of replacing it.

    The stock adapter drops the caller's `extra` dictionary in favour of its own; here the
    adapter context (interaction_id, pipeline_name) is the base and call-site fields are added on top.
    """

    def process(self, msg, kwargs):
        kwargs['extra'] = {**self.extra, **(kwargs.get('extra') or {})}
        return msg, kwargs


def get_logger(name: str) -> logging.LoggerAdapter:
    """
    Get a logger carrying default values for the per-turn fields.

    Args:
        name (str): Logger name (usually __name__)

    Returns:
        logging.LoggerAdapter: Adapter whose `extra` holds interaction_id and pipeline_name
    """
    logger = logging.getLogger(name)
    return TurnLoggerAdapter(logger, {
        'interaction_id': 'no_id',
        'pipeline_name': 'no_pipeline'
    })

def setup_app_logging(config: dict = None, default_level=logging.INFO) -> None:
    """
    Set up logging for the entire application.

    Configures the root logger with a console handler and, when `file_path` is set, a rotating file
    handler. Existing root handlers are removed first so repeated calls (e.g. in tests) do not duplicate output.

    Args:
        config (dict, optional): Logging settings with the keys 'level', 'file_path', 'max_bytes',
                                'backup_count', 'format' and 'date_format'.
        default_level (int, optional): Level used when 'level' is missing or invalid.
    """
    if config is None:
        config = {}

    log_level_str = str(config.get('level', logging.getLevelName(default_level))).upper()
    numeric_log_level = getattr(logging, log_level_str, default_level)
    if not isinstance(numeric_log_level, int):
        print(f"Warning: Invalid log level string '{log_level_str}'. Using default level {logging.getLevelName(default_level)}.", file=sys.stderr)
        numeric_log_level = default_level

    log_format = config.get('format', DEFAULT_LOG_FORMAT)
    log_date_format = config.get('date_format', DEFAULT_LOG_DATE_FORMAT)

    formatter = StructuredLogFormatter(log_format, datefmt=log_date_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_log_level)

    if root_logger.hasHandlers():
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file_path = config.get('file_path')
    if log_file_path:
        try:
            Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_file_path,
                maxBytes=int(config.get('max_bytes', 5*1024*1024)),
                backupCount=int(config.get('backup_count', 3)),
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
        except OSError as e:
            print(f"Error setting up file logging to {log_file_path}: {e}. File logging will be disabled.", file=sys.stderr)

    get_logger("LoggingConfig").info("Application logging setup complete. Level: %s", log_level_str)
