from abc import ABC, abstractmethod


class Strategy(ABC):
    """
    Strategy is an abstract base class that defines the interface for the arithmetic strategies
    Each subclass must implement the 'execute' method to compute a result from two operands

    Responsibilities:
    - Enforce a single 'execute(a, b)' contract for all calculation strategies
    - Keep strategies stateless so the same operands always give the same result
    """

    @abstractmethod
    def execute(self, a: int, b: int) -> float:
        """
        Compute the strategy's result for the given operands. Must be implemented by subclasses

        Args:
            a (int): The left operand
            b (int): The right operand

        Returns:
            float: The computed result, integer results may be returned as int so they stay exact
        """
        pass
