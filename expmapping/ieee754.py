# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2020 Datadog, Inc.

"""Helpers for scaling IEEE 754 double precision values by powers of two.

Computing ``x * 2 ** n`` as ``x * pow(2, n)`` overflows (or underflows) as
soon as ``2 ** n`` leaves the float64 range, even when the product itself would
have been representable. The helpers here work on the binary exponent instead
and saturate to a signed zero or infinity rather than raising.
"""

import math

import numpy as np


_FINFO = np.finfo(np.float64)

MANTISSA_WIDTH = int(_FINFO.nmant)
MIN_NORMAL_EXPONENT = int(_FINFO.minexp)
MAX_NORMAL_EXPONENT = int(_FINFO.maxexp) - 1
MIN_NORMAL_VALUE = float(_FINFO.tiny)
MAX_NORMAL_VALUE = float(_FINFO.max)

LOG2_E = 1.0 / math.log(2.0)


def scaled_power_of_two(x, n):
    """Return x * 2**n without evaluating 2**n on its own.

    Args:
        x (float)
        n (int): any integer, the result saturates once it leaves the
            float64 range
    Returns:
        float: ``+-0``, ``+-inf`` and NaN are returned unchanged, results
        too small to represent underflow to a subnormal or a signed zero and
        results too large saturate to a signed infinity
    """
    mantissa, exponent = math.frexp(x)
    try:
        return math.ldexp(mantissa, exponent + int(n))
    except OverflowError:
        return math.copysign(math.inf, x)


def exp2(x):
    """Return 2**x, saturating to inf or 0.0 instead of raising."""
    with np.errstate(over="ignore", under="ignore"):
        return float(np.exp2(x))
