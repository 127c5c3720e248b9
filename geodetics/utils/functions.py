"""Module for miscellaneous multi-use functions"""

__all__ = ['dms_components', 'round_half_up']

from typing import Tuple


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def dms_components(dd: float, precision: int = 5) -> Tuple[int, int, float]:
    """
    Converts the magnitude of a Decimal Degree to Degrees Minutes Seconds

    Args:
        dd:
            The decimal degree value. The sign is discarded.
        precision:
            (Default 5) The decimal precision of the seconds component

    Returns:
        (degrees, minutes, seconds)
    """
    minutes, seconds = divmod(abs(dd) * 3600, 60)
    degrees, minutes = divmod(minutes, 60)
    seconds = round_half_up(seconds, precision)
    if seconds >= 60:
        seconds, minutes = 0.0, minutes + 1
    if minutes >= 60:
        minutes, degrees = minutes - 60, degrees + 1

    return int(degrees), int(minutes), seconds
