# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2020 Datadog, Inc.

from .config import DEFAULT_SCALE
from .config import MAX_SCALE
from .config import MIN_SCALE
from .config import IllegalArgumentException
from .config import UnsupportedScaleException
from .config import new_mapping
from .config import scale_for_relative_accuracy
from .config import validate_scale
from .ieee754 import exp2
from .ieee754 import scaled_power_of_two
from .mapping import HistogramMapper
from .mapping import LogarithmicMapping


__all__ = [
    "DEFAULT_SCALE",
    "MAX_SCALE",
    "MIN_SCALE",
    "HistogramMapper",
    "IllegalArgumentException",
    "LogarithmicMapping",
    "UnsupportedScaleException",
    "exp2",
    "new_mapping",
    "scale_for_relative_accuracy",
    "scaled_power_of_two",
    "validate_scale",
]
