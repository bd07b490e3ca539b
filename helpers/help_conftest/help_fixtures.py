from custom_conf.initialize_config import ConfigInitializer
from utils.framework.custom_logger_util import get_logger, setup_session_logging

LOGGER = get_logger("pytest_session_logger")


class ConftestHelper:
    def __init__(self):
        """
        Initialization can take place in future developments
        """

    @staticmethod
    def get_logger():
        return LOGGER

    @staticmethod
    def initiate_setup_config(config):
        setup_session_logging(config)

    @staticmethod
    def load_session_config(settings_path):
        # env vars are ignored so a developer shell cannot change test expectations
        initializer = ConfigInitializer(settings_path=settings_path, detect_env_vars=False)
        conf_manager = initializer.initialize()
        LOGGER.debug(f"Session settings: {conf_manager.snapshot()}")
        return conf_manager
