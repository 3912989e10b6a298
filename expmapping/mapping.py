# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2020 Datadog, Inc.

"""A mapping between positive values and integer bucket indices for base-2
exponential histograms.

The buckets are the half-open intervals ``[base**i, base**(i + 1))`` where the
base is ``2 ** (2 ** -scale)``, so that each increment of the scale splits
every bucket in two. Implementations of :class:`HistogramMapper` share that
contract and can be swapped by the code that builds histograms. The
:class:`LogarithmicMapping` is the general one: it evaluates one logarithm per
value and supports every scale. Values that sit exactly on a bucket boundary
may land in either adjacent bucket because of floating-point rounding.
"""

from abc import ABC, abstractmethod
import math

from .ieee754 import LOG2_E
from .ieee754 import exp2
from .ieee754 import scaled_power_of_two


class HistogramMapper(ABC):
    """
    Attributes:
        scale (int): the resolution of the mapping; the base of the
            exponential buckets is 2 ** (2 ** -scale)
    """

    @property
    @abstractmethod
    def scale(self):
        """int: the scale the mapping was built with"""

    @abstractmethod
    def map_to_index(self, value):
        """
        Args:
            value (float): a positive, finite value
        Returns:
            int: the index of the bucket containing value
        """

    @abstractmethod
    def lower_boundary(self, index):
        """
        Args:
            index (int)
        Returns:
            float: the inclusive lower edge of the bucket specified by index
        """

    def upper_boundary(self, index):
        """
        Args:
            index (int)
        Returns:
            float: the exclusive upper edge of the bucket specified by index
        """
        return self.lower_boundary(index + 1)


class LogarithmicMapping(HistogramMapper):
    """A HistogramMapper that computes indices from the natural logarithm of
    the value. The scale is not validated: scales beyond the float64 exponent
    range give a scale factor of 0 or inf, and rejecting them is up to the
    caller (see :func:`expmapping.config.new_mapping`).

    Attributes:
        scale_factor (float): used for calculating log_base(value)
            scale_factor = log2(e) * 2 ** scale
        base (float): 2 ** (2 ** -scale)
        relative_accuracy (float): (base - 1) / (base + 1)
    """

    def __init__(self, scale):
        self._scale = scale
        # index = log(value) / log(base)
        #       = log(value) / (2 ** -scale * log(2))
        #       = log(value) * (log2(e) * 2 ** scale)
        self._scale_factor = scaled_power_of_two(LOG2_E, scale)

    def __repr__(self):
        return "LogarithmicMapping(scale={})".format(self._scale)

    def __eq__(self, other):
        if not isinstance(other, LogarithmicMapping):
            return NotImplemented
        return self._scale == other._scale

    def __hash__(self):
        return hash((LogarithmicMapping, self._scale))

    @property
    def scale(self):
        """int: the scale the mapping was built with"""
        return self._scale

    @property
    def scale_factor(self):
        """float: log2(e) * 2 ** scale"""
        return self._scale_factor

    @property
    def base(self):
        """float: 2 ** (2 ** -scale), the ratio between consecutive boundaries"""
        return exp2(scaled_power_of_two(1.0, -self._scale))

    @property
    def relative_accuracy(self):
        """float: (base - 1) / (base + 1)"""
        # (base - 1) / (base + 1) loses every digit to cancellation for large
        # scales, tanh(ln(base) / 2) is the same quantity.
        return math.tanh(scaled_power_of_two(math.log(2.0), -self._scale - 1))

    def map_to_index(self, value):
        """
        Args:
            value (float): positive and finite, not checked
        Returns:
            int: floor(log(value) * scale_factor)
        """
        # floor rounds toward -inf, so values below 1 get consistent negative
        # indices.
        return math.floor(math.log(value) * self._scale_factor)

    def lower_boundary(self, index):
        """Return base ** index, 0.0 or inf once it leaves the float64 range."""
        try:
            index = float(index)
        except OverflowError:
            # int beyond float64, the boundary is far out of range either way
            return math.inf if index > 0 else 0.0
        # base ** index = 2 ** (index * 2 ** -scale)
        return exp2(scaled_power_of_two(index, -self._scale))
