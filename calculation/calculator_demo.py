import math

from utils.framework.custom_logger_util import get_logger

from .calculation_strategy.addition_strategy import AdditionStrategy
from .calculation_strategy.division_strategy import DivisionStrategy
from .calculation_strategy.multiplication_strategy import \
    MultiplicationStrategy
from .calculation_strategy.subtraction_strategy import SubtractionStrategy
from .context import CalculatorContext

LOGGER = get_logger(__name__)


class CalculatorDemo:
    """
    CalculatorDemo walks a CalculatorContext through every arithmetic strategy,
    swapping the strategy at runtime between steps, and finishes with a division by zero

    Attributes:
        context (CalculatorContext): Context used for every step of the run
        logger: Diagnostic channel handed to the division strategy
    """

    def __init__(self, context: CalculatorContext | None = None, logger=None):
        """
        Initialize the demo with an optional context and diagnostic logger

        Args:
            context (CalculatorContext | None): Existing context, a new one starting with addition if None
            logger: Diagnostic channel for the division strategy, the module logger if None
        """
        self.logger = logger if logger is not None else LOGGER
        self.context = context if context is not None else CalculatorContext(AdditionStrategy())

    def run(self, a: int, b: int) -> list[tuple[str, float]]:
        """
        Run the fixed sequence of calculations

        Args:
            a (int): The left operand for every step
            b (int): The right operand for every step except the last one

        Returns:
            list[tuple[str, float]]: The label and result of each step, in order
        """
        LOGGER.info(f"Running calculator demo with operands a={a}, b={b}")
        results = []

        if not isinstance(self.context.strategy, AdditionStrategy):
            self.context.set_strategy(AdditionStrategy())
        results.append(("Addition", self.context.calculate(a, b)))

        self.context.set_strategy(SubtractionStrategy())
        results.append(("Subtraction", self.context.calculate(a, b)))

        self.context.set_strategy(MultiplicationStrategy())
        results.append(("Multiplication", self.context.calculate(a, b)))

        self.context.set_strategy(DivisionStrategy(self.logger))
        results.append(("Division", self.context.calculate(a, b)))

        # the division strategy stays installed for the zero divisor step
        results.append(("Division by zero", self.context.calculate(a, 0)))

        for label, result in results:
            LOGGER.debug(f"{label} -> {result}")

        return results


def format_result(value: float) -> str:
    """
    Render a calculation result for console output

    Args:
        value (float): The result to render

    Returns:
        str: 'NaN' for the sentinel, whole numbers without a fractional part, other values as str

    Examples:
        >>> format_result(30.0)
        '30'

        >>> format_result(2.5)
        '2.5'
    """
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return str(value)
