"""
Logging for the revreader package.

Every module logs under the ``revreader`` hierarchy. The package logger only
carries a NullHandler, so embedding applications see nothing until they
configure logging themselves or call :func:`init_app_logger`. The CLI prints
records on stdout, so console logs go to stderr.
"""

import logging
import os
import sys
from typing import Optional


APP_LOGGER_NAME = "revreader"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def install_null_handler() -> None:
    """Keep the package silent, without "no handlers" warnings, until logging is configured."""
    package_logger = logging.getLogger(APP_LOGGER_NAME)
    if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())


def _output_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]


def _parse_level(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logger(
    name: str = APP_LOGGER_NAME,
    log_level: str = "INFO",
    log_file: Optional[str] = None
) -> logging.Logger:
    """
    Set up a logger with a stderr console handler and optional file output.

    Args:
        name: Logger name
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            unknown names fall back to INFO
        log_file: Optional path to log file, parent directories are created

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    level = _parse_level(log_level)
    logger.setLevel(level)

    # Prevent duplicate handlers; the package NullHandler does not count
    if _output_handlers(logger):
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def _package_loggers() -> list[logging.Logger]:
    prefix = APP_LOGGER_NAME + "."
    return [
        logger for name, logger in list(logging.Logger.manager.loggerDict.items())
        if name.startswith(prefix) and isinstance(logger, logging.Logger)
    ]


# Application logger instance
app_logger: Optional[logging.Logger] = None


def init_app_logger(settings, log_level: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``revreader`` logger hierarchy from settings.

    Module loggers (``revreader.reader.*``, ``revreader.utils.*``) are reset
    to inherit their level and propagate to the package logger, so one level
    and one set of handlers control the whole package.

    Args:
        settings: Application settings instance
        log_level: Overrides ``settings.log_level`` when given

    Returns:
        Configured application logger
    """
    global app_logger

    app_logger = setup_logger(
        name=APP_LOGGER_NAME,
        log_level=log_level or settings.log_level,
        log_file=settings.log_file
    )

    for module_logger in _package_loggers():
        module_logger.setLevel(logging.NOTSET)
        module_logger.propagate = True

    return app_logger


def shutdown_app_logger() -> None:
    """Detach and close the handlers added by :func:`init_app_logger`."""
    global app_logger

    package_logger = logging.getLogger(APP_LOGGER_NAME)
    for handler in _output_handlers(package_logger):
        package_logger.removeHandler(handler)
        handler.close()

    app_logger = None


def get_app_logger() -> logging.Logger:
    """
    Get the application logger.

    Returns:
        Application logger instance
    """
    if app_logger is None:
        # Return a default logger if not initialized
        return setup_logger(APP_LOGGER_NAME)

    return app_logger
