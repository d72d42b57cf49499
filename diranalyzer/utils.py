"""
Utility functions for Directory Analyzer.
"""

import math

BYTES_PER_MB = 1024 * 1024
SECONDS_PER_DAY = 60 * 60 * 24


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding toward positive infinity.

    The builtin ``round`` rounds halves to even, which would turn a 12.5 score
    into 12. Here 12.5 becomes 13 and -2.5 becomes -2.
    """
    return math.floor(value + 0.5)
