import math
import unittest
from unittest.mock import Mock

from calculation.calculation_strategy.division_strategy import (
    DIVISION_BY_ZERO_NOTICE, DivisionStrategy)
from utils.common.synthetic_data_util import generate_operand_pairs


class TestDivisionStrategy(unittest.TestCase):

    def setUp(self):
        self.logger = Mock(spec=["warning"])
        self.strategy = DivisionStrategy(self.logger)

    def test_true_division(self):
        self.assertEqual(self.strategy.execute(20, 10), 2.0)
        self.assertEqual(self.strategy.execute(7, 2), 3.5)
        self.assertEqual(self.strategy.execute(0, 5), 0.0)
        self.assertAlmostEqual(self.strategy.execute(1, 3), 1 / 3)

        for a, b in generate_operand_pairs(50, non_zero_b=True, seed=99):
            self.assertAlmostEqual(self.strategy.execute(a, b), a / b)

        self.logger.warning.assert_not_called()

    def test_zero_divisor_returns_nan_and_notifies(self):
        result = self.strategy.execute(20, 0)

        self.assertTrue(math.isnan(result))
        self.assertNotEqual(result, result)
        self.logger.warning.assert_called_once_with(DIVISION_BY_ZERO_NOTICE)

    def test_quotient_too_large_for_float(self):
        self.assertEqual(self.strategy.execute(10**400, 3), math.inf)
        self.assertEqual(self.strategy.execute(-10**400, 3), -math.inf)
        self.assertEqual(self.strategy.execute(10**400, -3), -math.inf)
        self.assertEqual(self.strategy.execute(10**400, 10**399), 10.0)
        self.logger.warning.assert_not_called()

    def test_zero_divided_by_zero(self):
        self.assertTrue(math.isnan(self.strategy.execute(0, 0)))
        self.assertEqual(self.logger.warning.call_count, 1)

    def test_default_logger_is_module_logger(self):
        strategy = DivisionStrategy()
        with self.assertLogs("calculation.calculation_strategy.division_strategy", level="WARNING") as logs:
            result = strategy.execute(-4, 0)

        self.assertTrue(math.isnan(result))
        self.assertEqual(len(logs.records), 1)
        self.assertEqual(logs.records[0].getMessage(), "Error: Division by zero")


if __name__ == "__main__":
    unittest.main()
