from .strategy_interface import Strategy


class AdditionStrategy(Strategy):
    """
    AdditionStrategy adds the two operands
    """

    def execute(self, a: int, b: int) -> float:
        return a + b
