import logging
import os
from datetime import datetime
from pathlib import Path

from utils.framework.custom_path_util import get_framework_root_path

APP_LOGGER_NAME = "calculation"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_NAME = "calculator.log"


def get_logger(name: str = __name__) -> logging.Logger:
    """
    Return a logger with the specified name.

    Args:
        name (str): Name of the logger, default is the module's __name__.

    Returns:
        logging.Logger: Configured logger instance.
    """
    return logging.getLogger(name)


def setup_logging(conf_manager) -> logging.Logger:
    """
    Configure the application logger from the loaded settings

    Handlers are attached once; calling this again only refreshes level and format

    Args:
        conf_manager (ConfManager): Settings holding log_level, log_format, log_to_file and log_dir

    Returns:
        logging.Logger: The configured application logger

    Raises:
        ValueError: If log_level is not a known logging level name
    """
    level_name = str(conf_manager.get_settings("log_level", "INFO")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    formatter = logging.Formatter(conf_manager.get_settings("log_format", DEFAULT_LOG_FORMAT))

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(level)

    if not any(getattr(handler, "_calc_handler", False) for handler in logger.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler._calc_handler = True
        logger.addHandler(stream_handler)

    if conf_manager.get_settings("log_to_file", False) and not _has_file_handler(logger):
        logs_dir = resolve_logs_dir(conf_manager.get_settings("log_dir", "logs"))
        logs_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(logs_dir / LOG_FILE_NAME)
        file_handler._calc_handler = True
        logger.addHandler(file_handler)

    for handler in logger.handlers:
        if getattr(handler, "_calc_handler", False):
            handler.setFormatter(formatter)

    return logger


def setup_session_logging(config) -> logging.Logger:
    """
    Configure file logging for a pytest session, one timestamped folder per run

    Args:
        config (pytest.Config): The pytest configuration object

    Returns:
        logging.Logger: The session logger
    """
    if not hasattr(config, "workerinput"):
        logs_dir = Path(config.rootdir) / "logs" / datetime.now().strftime("%Y%m%d_%H%M%S")
        logs_dir.mkdir(parents=True, exist_ok=True)
        os.environ["LOGS_DIR"] = str(logs_dir)
    else:
        logs_dir = Path(os.environ["LOGS_DIR"])

    worker_id = os.environ.get("PYTEST_XDIST_WORKER")
    log_file = logs_dir / f"tests_{worker_id}.log" if worker_id else logs_dir / "tests.log"

    session_logger = logging.getLogger("pytest_session_logger")
    session_logger.setLevel(config.getini("log_file_level") or logging.DEBUG)

    # Avoid duplicate handlers
    if not session_logger.handlers:
        handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter(config.getini("log_file_format") or DEFAULT_LOG_FORMAT))
        session_logger.addHandler(handler)

    config.logs_dir = str(logs_dir)
    return session_logger


def resolve_logs_dir(log_dir: str | Path) -> Path:
    """
    Resolve the log directory, relative paths are anchored at the framework root,
    or at the working directory when running from an installed distribution

    Args:
        log_dir (str | Path): Configured log directory

    Returns:
        Path: Absolute log directory
    """
    path = Path(log_dir)
    if path.is_absolute():
        return path
    try:
        return get_framework_root_path() / path
    except FileNotFoundError:
        return Path.cwd() / path


def _has_file_handler(logger: logging.Logger) -> bool:
    return any(isinstance(handler, logging.FileHandler) and getattr(handler, "_calc_handler", False)
               for handler in logger.handlers)
