# -*- coding: utf-8 -*-

"""Units conversion helpers for Revit.

Revit internal units are feet; house dimensions in the rules file are
millimeters.

Example:
    >>> from utils_units import mm_to_ft
    >>> mm_to_ft(304.8)
    1.0
"""
import math
from typing import Optional, Union


MM_PER_FOOT: float = 304.8


def mm_to_ft(mm: Optional[Union[float, int, str]]) -> Optional[float]:
    """Convert millimeters to feet.

    Args:
        mm: Value in millimeters. Can be float, int, or numeric string.
            If None, returns None.

    Returns:
        Value converted to feet, or None if input is None.
    """
    if mm is None:
        return None
    return float(mm) / MM_PER_FOOT


def positive_mm_to_ft(mm, name='value'):
    """Convert a required positive length in mm to feet.

    Raises:
        ValueError: if the value is missing, not numeric, not finite or not positive.
    """
    try:
        value = float(mm)
    except (TypeError, ValueError):
        raise ValueError(u'{0} must be a number, got {1!r}'.format(name, mm))
    if not math.isfinite(value) or value <= 0:
        raise ValueError(u'{0} must be a finite positive number, got {1}'.format(name, value))
    return value / MM_PER_FOOT
