# Unless explicitly stated otherwise all files in this repository are licensed
# under the Apache License 2.0.
# This product includes software developed at Datadog (https://www.datadoghq.com/).
# Copyright 2020 Datadog, Inc.

"""Tests for scale validation and mapping selection"""

import logging
import threading

import pytest

import expmapping
from expmapping import config
from expmapping.config import DEFAULT_SCALE
from expmapping.config import MAX_SCALE
from expmapping.config import MIN_SCALE
from expmapping.config import IllegalArgumentException
from expmapping.config import UnsupportedScaleException
from expmapping.config import new_mapping
from expmapping.config import scale_for_relative_accuracy
from expmapping.config import validate_scale
from expmapping.mapping import HistogramMapper
from expmapping.mapping import LogarithmicMapping


@pytest.mark.parametrize("scale", [MIN_SCALE, -1, 0, 1, MAX_SCALE])
def test_validate_scale(scale):
    assert validate_scale(scale) == scale


@pytest.mark.parametrize("scale", [MIN_SCALE - 1, MAX_SCALE + 1, -1000, 1000])
def test_validate_scale_out_of_range(scale):
    with pytest.raises(UnsupportedScaleException):
        validate_scale(scale)


@pytest.mark.parametrize("scale", [1.5, "3", True, None])
def test_validate_scale_not_an_integer(scale):
    with pytest.raises(UnsupportedScaleException):
        validate_scale(scale)


def test_new_mapping():
    mapping = new_mapping(3)
    assert isinstance(mapping, HistogramMapper)
    assert isinstance(mapping, LogarithmicMapping)
    assert mapping.scale == 3


def test_new_mapping_default_scale():
    assert new_mapping().scale == DEFAULT_SCALE
    assert new_mapping(None).scale == DEFAULT_SCALE


def test_new_mapping_rejects_unsupported_scale():
    with pytest.raises(UnsupportedScaleException):
        new_mapping(MAX_SCALE + 1)
    with pytest.raises(UnsupportedScaleException):
        new_mapping(MIN_SCALE - 1)


def test_new_mapping_is_shared():
    assert new_mapping(5) is new_mapping(5)
    assert new_mapping(5) is not new_mapping(6)


def test_new_mapping_across_threads():
    results = []

    def build():
        results.append(new_mapping(7))

    threads = [threading.Thread(target=build) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert all(mapping == LogarithmicMapping(7) for mapping in results)


def test_new_mapping_logs(caplog):
    config._cached_mapping.cache_clear()
    with caplog.at_level(logging.DEBUG, logger="expmapping.config"):
        new_mapping(-7)
    assert "scale -7" in caplog.text


@pytest.mark.parametrize(
    "relative_accuracy,scale",
    [(0.99, -2), (0.5, 0), (0.3, 1), (0.01, 6), (0.001, 9), (1e-6, 19)],
)
def test_scale_for_relative_accuracy(relative_accuracy, scale):
    assert scale_for_relative_accuracy(relative_accuracy) == scale
    assert new_mapping(scale).relative_accuracy <= relative_accuracy


@pytest.mark.parametrize("relative_accuracy", [0, -0.1, 1, 1.5])
def test_scale_for_relative_accuracy_illegal(relative_accuracy):
    with pytest.raises(IllegalArgumentException):
        scale_for_relative_accuracy(relative_accuracy)


def test_scale_for_relative_accuracy_too_fine():
    with pytest.raises(UnsupportedScaleException):
        scale_for_relative_accuracy(1e-9)


def test_package_exports():
    assert expmapping.new_mapping is new_mapping
    assert expmapping.LogarithmicMapping is LogarithmicMapping
    assert expmapping.HistogramMapper is HistogramMapper
