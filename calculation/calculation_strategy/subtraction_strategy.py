from .strategy_interface import Strategy


class SubtractionStrategy(Strategy):
    """
    SubtractionStrategy subtracts the right operand from the left one
    """

    def execute(self, a: int, b: int) -> float:
        return a - b
