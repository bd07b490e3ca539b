import math

from utils.framework.custom_logger_util import get_logger

from .strategy_interface import Strategy

LOGGER = get_logger(__name__)

DIVISION_BY_ZERO_NOTICE = "Error: Division by zero"


class DivisionStrategy(Strategy):
    """
    DivisionStrategy divides the left operand by the right one using true division

    A zero divisor is not raised to the caller: a notice is written to the diagnostic
    logger and NaN is returned, which callers can detect with math.isnan

    Attributes:
        logger: Diagnostic channel used for the division by zero notice
    """

    def __init__(self, logger=None):
        """
        Initialize the DivisionStrategy with an optional diagnostic logger

        Args:
            logger: Any object with a 'warning' method, defaults to the module logger
        """
        self.logger = logger if logger is not None else LOGGER

    def execute(self, a: int, b: int) -> float:
        """
        Divide a by b

        Args:
            a (int): The dividend
            b (int): The divisor

        Returns:
            float: The quotient, NaN when the divisor is zero, signed infinity when it overflows a float
        """
        if b == 0:
            self.logger.warning(DIVISION_BY_ZERO_NOTICE)
            return math.nan

        try:
            return a / b
        except OverflowError:
            return -math.inf if (a < 0) != (b < 0) else math.inf
