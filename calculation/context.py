from calculation.calculation_strategy.strategy_interface import Strategy
from utils.framework.custom_logger_util import get_logger

LOGGER = get_logger(__name__)


class CalculatorContext:
    """
    Context class that holds the active calculation strategy and delegates computations to it

    Attributes:
        _strategy (Strategy): The currently active calculation strategy
    """

    def __init__(self, strategy: Strategy):
        """
        Initialize the context with the given strategy

        Args:
            strategy (Strategy): The initial strategy, must not be None

        Raises:
            ValueError: If no strategy is provided
            TypeError: If the strategy does not implement the Strategy interface
        """
        self._strategy = self._validate_strategy(strategy)

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    def set_strategy(self, strategy: Strategy) -> None:
        """
        Replace the active strategy, effective for every later calculation

        Args:
            strategy (Strategy): The new strategy to be set

        Raises:
            ValueError: If no strategy is provided
            TypeError: If the strategy does not implement the Strategy interface
        """
        self._strategy = self._validate_strategy(strategy)
        LOGGER.debug(f"Active strategy set to {type(strategy).__name__}")

    def calculate(self, a: int, b: int) -> float:
        """
        Forward the operands unchanged to the active strategy

        Args:
            a (int): The left operand
            b (int): The right operand

        Returns:
            float: The result of the active strategy's execution
        """
        return self._strategy.execute(a, b)

    @staticmethod
    def _validate_strategy(strategy):
        if strategy is None:
            raise ValueError("A calculation strategy is required")
        if not isinstance(strategy, Strategy):
            raise TypeError(f"Expected a Strategy instance, got {type(strategy).__name__}")
        return strategy
