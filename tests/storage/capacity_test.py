# SPDX-FileCopyrightText: Red Hat, Inc.
# SPDX-License-Identifier: GPL-2.0-or-later

import pytest

from csinode.common import exception
from csinode.common.units import GiB, TiB
from csinode.storage import capacity
from csinode.storage import constants as sc
from csinode.storage.capacity import CapacityRange


def test_policy():
    assert sc.MINIMUM_VOLUME_SIZE == 50 * GiB
    assert sc.MAXIMUM_VOLUME_SIZE == 32 * TiB
    assert sc.DEFAULT_VOLUME_SIZE == sc.MINIMUM_VOLUME_SIZE


@pytest.mark.parametrize("capacity_range", [
    None,
    CapacityRange(),
    CapacityRange(0, 0),
    CapacityRange(None, 0),
    CapacityRange(0, None),
])
def test_default(capacity_range):
    assert capacity.extract_storage(capacity_range) == 50 * GiB


@pytest.mark.parametrize("required,expected", [
    (1, 50 * GiB),
    (10 * GiB, 50 * GiB),
    (50 * GiB, 50 * GiB),
    (50 * GiB + 1, 50 * GiB + 1),
    (10 * TiB, 10 * TiB),
    (32 * TiB, 32 * TiB),
    # The maximum is not enforced.
    (100 * TiB, 100 * TiB),
])
def test_required_only(required, expected):
    assert capacity.extract_storage(CapacityRange(required, 0)) == expected
    assert capacity.extract_storage(CapacityRange(required)) == expected


@pytest.mark.parametrize("limit,expected", [
    (1, 50 * GiB),
    (50 * GiB, 50 * GiB),
    (1 * TiB, 1 * TiB),
    # The maximum is not enforced.
    (64 * TiB, 64 * TiB),
])
def test_limit_only(limit, expected):
    assert capacity.extract_storage(CapacityRange(0, limit)) == expected
    assert capacity.extract_storage(
        CapacityRange(limit_bytes=limit)) == expected


@pytest.mark.parametrize("required,limit", [
    (0, 1),
    (1, 1),
    (1, 100 * GiB),
    (10 * GiB, 20 * GiB),
    (60 * GiB, 60 * GiB),
    (60 * GiB, 1 * TiB),
    (1 * TiB, 40 * TiB),
])
def test_limit_wins(required, limit):
    expected = max(limit, sc.MINIMUM_VOLUME_SIZE)
    assert capacity.extract_storage(
        CapacityRange(required, limit)) == expected


@pytest.mark.parametrize("required,limit", [
    (100 * TiB, 50 * TiB),
    (2, 1),
    (60 * GiB, 50 * GiB),
])
def test_limit_less_than_required(required, limit):
    with pytest.raises(exception.InvalidCapacityRange) as e:
        capacity.extract_storage(CapacityRange(required, limit))
    assert e.value.code == exception.INVALID_ARGUMENT
    assert "can not be less than required" in str(e.value)


def test_limit_less_than_required_message():
    with pytest.raises(exception.InvalidCapacityRange) as e:
        capacity.extract_storage(CapacityRange(100 * TiB, 50 * TiB))
    assert "limit (50Ti)" in str(e.value)
    assert "required (100Ti)" in str(e.value)


@pytest.mark.parametrize("size,unit,expected", [
    (0, GiB, 0),
    (1, GiB, 1),
    (GiB, GiB, 1),
    (GiB + 1, GiB, 2),
    (50 * GiB, GiB, 50),
])
def test_round_up_size(size, unit, expected):
    assert capacity.round_up_size(size, unit) == expected


def test_round_up_min_size():
    assert capacity.round_up_min_size() == 50
