# core/utils.py
from umbralux.config import EPSILON


def is_close(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """
    Returns True when two floats differ by less than epsilon.
    """
    return abs(a - b) < epsilon
