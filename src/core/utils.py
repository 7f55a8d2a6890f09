# core/utils.py
import sys
import numpy as np

# Largest finite float, used as the open-ended sentinel by BBox.
FLOAT_MAX = sys.float_info.max


def ieee_div(a: float, b: float) -> float:
    """
    Divides with IEEE-754 semantics: x / 0.0 gives +-inf and 0.0 / 0.0
    gives NaN instead of raising ZeroDivisionError. Overflow is silent.
    """
    with np.errstate(all="ignore"):
        return float(np.float64(a) / np.float64(b))


def fmin(a: float, b: float) -> float:
    """
    Smaller of a and b. A NaN operand is ignored in favour of the other one.
    """
    return float(np.fmin(a, b))


def fmax(a: float, b: float) -> float:
    """
    Larger of a and b. A NaN operand is ignored in favour of the other one.
    """
    return float(np.fmax(a, b))


def ieee_tan(a: float) -> float:
    """
    Tangent that returns NaN for infinite input instead of raising ValueError.
    """
    with np.errstate(all="ignore"):
        return float(np.tan(np.float64(a)))
