import argparse
import sys

from calculation.calculator_demo import CalculatorDemo, format_result
from custom_conf.initialize_config import ConfigInitializer
from utils.framework.custom_logger_util import get_logger, setup_logging

LOGGER = get_logger("calculation.main")

CONFIG_ERROR_EXIT_CODE = 2
ZERO_DIVISOR_LABEL = "Division by zero"


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parses command-line arguments

    Args:
        argv (list[str] | None): Arguments to parse, sys.argv when None

    Returns:
        argparse.Namespace: Parsed arguments
    """
    parser = argparse.ArgumentParser(description="Run the strategy pattern calculator demo.")

    parser.add_argument("--config", dest="settings_path", help="Path to a JSON or YAML settings file.")
    parser.add_argument("--operand_a", type=int, help="Left operand. Default comes from settings (20).")
    parser.add_argument("--operand_b", type=int, help="Right operand. Default comes from settings (10).")
    parser.add_argument("--log_level", help="Logging level, for example DEBUG or WARNING.")
    parser.add_argument("--no_env_vars", action="store_true", help="Ignore CALC_ environment variables.")
    return parser.parse_args(argv)


def collect_overrides(args: argparse.Namespace) -> dict:
    """
    Collects the settings given on the command line

    Args:
        args (argparse.Namespace): Parsed arguments

    Returns:
        dict: Setting overrides, None for arguments that were not provided
    """
    return {
        "operand_a": args.operand_a,
        "operand_b": args.operand_b,
        "log_level": args.log_level,
    }


def build_output_lines(results: list[tuple[str, float]]) -> list[str]:
    """
    Render one console line per demo step, the zero divisor step gets its own header line

    Args:
        results (list[tuple[str, float]]): Labels and results returned by CalculatorDemo.run

    Returns:
        list[str]: Lines to print
    """
    lines = []
    for label, result in results:
        if label == ZERO_DIVISOR_LABEL:
            lines.append("Division by zero test:")
            label = "Division"
        lines.append(f"{label} Result: {format_result(result)}")
    return lines


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for running the calculator demo

    Returns:
        int: Process exit code
    """
    args = parse_arguments(argv)

    try:
        initializer = ConfigInitializer(
            settings_path=args.settings_path,
            detect_env_vars=not args.no_env_vars,
            overrides=collect_overrides(args),
        )
        config = initializer.initialize()
        setup_logging(config)
    except (FileNotFoundError, TypeError, ValueError) as e:
        LOGGER.error(f"Failed to load configuration: {e}")
        return CONFIG_ERROR_EXIT_CODE

    demo = CalculatorDemo()
    results = demo.run(config.get_settings("operand_a"), config.get_settings("operand_b"))

    for line in build_output_lines(results):
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
