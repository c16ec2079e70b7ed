import logging
import sys
import json
from datetime import datetime, timezone

LOGGER_ROOT = "placeholder-taf"

# Request context passed through `extra=` by the client
REQUEST_FIELDS = ("method", "url", "status", "elapsed_ms")


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
        }
        for field in REQUEST_FIELDS:
            if hasattr(record, field):
                log_record[field] = getattr(record, field)
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log_record)


def get_logger(name: str, env: str = "dev", level: str = "INFO"):
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)

    if env == "prod":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))

    logger.addHandler(handler)
    return logger


def configure_logging(settings):
    """Attach the package handler using ApiSettings.env / log_level."""
    return get_logger(LOGGER_ROOT, env=settings.env, level=settings.log_level)
