"""Validators shared by the scoring engine and the input parser."""

from bowling import exceptions

NUM_PINS = 10


def validate_pin_count(value):
    """Validates the number of pins knocked down by a single roll.

    Args:
        value: integer; pins knocked down

    Raises:
        InvalidRollException if the value is not an integer between 0 and 10.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise exceptions.InvalidRollException(value)
    if value < 0 or value > NUM_PINS:
        raise exceptions.InvalidRollException(value)
