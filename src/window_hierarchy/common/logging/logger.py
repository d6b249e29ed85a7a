# shared package logger, configured once from the service settings
import logging
import sys
from window_hierarchy.config.app_config import get_settings

LOGGER_NAME = "window_hierarchy"

def _build_logger() -> logging.Logger:
    """
    Builds the package-wide logger.
    - Level and format come from HierarchySettings (LOG_LEVEL, LOG_FORMAT).
    NOTE: handlers are only attached once, so re-imports don't duplicate log lines.
    """
    settings = get_settings()
    _logger = logging.getLogger(LOGGER_NAME)
    _logger.setLevel(settings.LOG_LEVEL)

    if not _logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
        _logger.addHandler(handler)

    # let the host tooling (trace replay, assertion runners) decide on root handlers
    _logger.propagate = settings.LOG_PROPAGATE
    return _logger

logger = _build_logger()
