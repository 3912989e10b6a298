# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2020 Datadog, Inc.

"""Histogram configuration: which scales are supported and how a mapping is
picked for a given scale or relative accuracy.

LogarithmicMapping accepts any scale; this is where unsupported scales are
rejected before a mapping gets built.
"""

import functools
import logging
import numbers

from .mapping import LogarithmicMapping


logger = logging.getLogger(__name__)

# Below MIN_SCALE a single bucket spans more than the whole float64 exponent
# range. Above MAX_SCALE the bucket count per octave outgrows what a histogram
# store can reasonably hold.
MIN_SCALE = -10
MAX_SCALE = 20
DEFAULT_SCALE = MAX_SCALE


class UnsupportedScaleException(Exception):
    """Raised when a scale is not an integer in [MIN_SCALE, MAX_SCALE]."""


class IllegalArgumentException(Exception):
    """Raised for a relative accuracy outside of (0, 1)."""


def validate_scale(scale):
    """
    Args:
        scale (int)
    Returns:
        int: scale, if it is a supported integer scale
    Raises:
        UnsupportedScaleException: if scale is not an integer or lies outside
            of [MIN_SCALE, MAX_SCALE]
    """
    if isinstance(scale, bool) or not isinstance(scale, numbers.Integral):
        raise UnsupportedScaleException(
            "Scale must be an integer, got {!r}".format(scale)
        )
    if scale < MIN_SCALE or scale > MAX_SCALE:
        raise UnsupportedScaleException(
            "Scale {} is outside of [{}, {}]".format(scale, MIN_SCALE, MAX_SCALE)
        )
    return int(scale)


def new_mapping(scale=None):
    """Return the mapping for scale, DEFAULT_SCALE if scale is None.

    Mappings are immutable, so a single instance per scale is shared.
    """
    if scale is None:
        scale = DEFAULT_SCALE
    return _cached_mapping(validate_scale(scale))


@functools.lru_cache(maxsize=None)
def _cached_mapping(scale):
    logger.debug("building logarithmic mapping for scale %d", scale)
    return LogarithmicMapping(scale)


def scale_for_relative_accuracy(relative_accuracy):
    """
    Args:
        relative_accuracy (float): the targeted accuracy (0. < alpha < 1.)
    Returns:
        int: the smallest supported scale whose mapping is at least that
            accurate
    """
    if not 0 < relative_accuracy < 1:
        raise IllegalArgumentException(
            "Relative accuracy must be between 0 and 1, got {}".format(
                relative_accuracy
            )
        )
    for scale in range(MIN_SCALE, MAX_SCALE + 1):
        if LogarithmicMapping(scale).relative_accuracy <= relative_accuracy:
            return scale
    raise UnsupportedScaleException(
        "No supported scale reaches a relative accuracy of {}".format(
            relative_accuracy
        )
    )
