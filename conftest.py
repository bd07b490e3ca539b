from unittest.mock import Mock

import pytest

from calculation.calculation_strategy.addition_strategy import AdditionStrategy
from calculation.context import CalculatorContext
from helpers.help_conftest.help_fixtures import ConftestHelper

helper = ConftestHelper()

LOGGER = helper.get_logger()

"""
Pytest Configuration and Fixtures

Adds the command-line options of the calculator test session, sets up session
logging and provides the fixtures shared by the flow tests.

References:
    - Pytest documentation: https://docs.pytest.org/
"""


def pytest_addoption(parser):
    """
    Define custom command-line options for pytest

    Command-line options:
        --calc_settings (str): Optional JSON or YAML settings file for the flow tests
    """
    parser.addoption(
        "--calc_settings",
        action="store",
        default=None,
        help="Path to a JSON or YAML settings file (optional)",
    )


def pytest_configure(config):
    """
    Configure pytest settings before tests run

    Args:
        config (pytest.Config): The pytest configuration object
    """
    helper.initiate_setup_config(config)
    LOGGER.info("Pytest configuration and logging setup completed.")


@pytest.fixture(scope="session")
def calc_config(request):
    """
    Session wide settings, built from the defaults and the optional --calc_settings file
    """
    config = helper.load_session_config(request.config.getoption("--calc_settings"))

    yield config

    config.clear()


@pytest.fixture
def diagnostic_logger():
    return Mock(spec=["warning"])


@pytest.fixture
def calculator_context():
    return CalculatorContext(AdditionStrategy())


def pytest_sessionfinish(session, exitstatus):
    LOGGER.info(f"Test session finished with exit status {exitstatus}")
