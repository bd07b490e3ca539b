from .strategy_interface import Strategy


class MultiplicationStrategy(Strategy):

    def execute(self, a: int, b: int) -> float:
        return a * b
