from faker import Faker

from utils.framework.custom_logger_util import get_logger

LOGGER = get_logger()


def generate_operand_pairs(
        count: int,
        min_value: int = -10_000,
        max_value: int = 10_000,
        non_zero_b: bool = False,
        seed: int | None = None) -> list[tuple[int, int]]:
    """
    Generate random integer operand pairs for exercising the calculation strategies

    Args:
        count (int): Number of pairs to generate
        min_value (int): Smallest operand value
        max_value (int): Largest operand value
        non_zero_b (bool): Never produce zero as the right operand
        seed (int | None): Seed for reproducible pairs

    Returns:
        list[tuple[int, int]]: The generated (a, b) pairs

    Raises:
        ValueError: If count is negative, the range is empty, or non_zero_b leaves no candidates
    """
    if count < 0:
        raise ValueError("count must not be negative")
    if min_value > max_value:
        raise ValueError("min_value must not be greater than max_value")
    if non_zero_b and min_value == max_value == 0:
        raise ValueError("No non-zero value available in the given range")

    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)

    pairs = []
    while len(pairs) < count:
        a = fake.pyint(min_value=min_value, max_value=max_value)
        b = fake.pyint(min_value=min_value, max_value=max_value)
        if non_zero_b and b == 0:
            continue
        pairs.append((a, b))

    LOGGER.debug(f"Generated {len(pairs)} synthetic operand pairs")
    return pairs
