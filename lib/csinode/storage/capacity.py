# SPDX-FileCopyrightText: Red Hat, Inc.
# SPDX-License-Identifier: GPL-2.0-or-later

"""
capacity - volume size negotiation

Resolve the capacity range of a CreateVolume or ControllerExpandVolume request
into the size we provision.
"""

from collections import namedtuple

from csinode.common import exception
from csinode.common.units import GiB
from csinode.common.units import format_bytes
from csinode.storage import constants as sc


class CapacityRange(namedtuple("CapacityRange", "required_bytes, limit_bytes")):
    """
    Requested volume size. A value of None or 0 means the value is not set.
    """
    __slots__ = ()

    def __new__(cls, required_bytes=None, limit_bytes=None):
        return super(CapacityRange, cls).__new__(
            cls, required_bytes, limit_bytes)

    @property
    def required_set(self):
        return self.required_bytes is not None and self.required_bytes > 0

    @property
    def limit_set(self):
        return self.limit_bytes is not None and self.limit_bytes > 0


def extract_storage(capacity_range):
    """
    Return the volume size in bytes for capacity_range.

    If no size is requested, return the default volume size. A requested size
    smaller than the minimum volume size is rounded up to the minimum. When a
    limit is given, the limit is used.

    Raises exception.InvalidCapacityRange if the limit is smaller than the
    required size.
    """
    if capacity_range is None:
        return sc.DEFAULT_VOLUME_SIZE

    required = capacity_range.required_bytes
    limit = capacity_range.limit_bytes
    required_set = capacity_range.required_set
    limit_set = capacity_range.limit_set

    if not required_set and not limit_set:
        return sc.DEFAULT_VOLUME_SIZE

    if required_set and limit_set and limit < required:
        raise exception.InvalidCapacityRange(
            "limit (%s) can not be less than required (%s) size"
            % (format_bytes(limit), format_bytes(required)))

    if required_set and not limit_set:
        return max(required, sc.MINIMUM_VOLUME_SIZE)

    # Any request with a limit ends here, so the maximum size check below is
    # never reached.
    if limit_set:
        return max(limit, sc.MINIMUM_VOLUME_SIZE)

    if required_set and required > sc.MAXIMUM_VOLUME_SIZE:
        raise exception.CapacityExceeded(
            "required (%s) can not exceed maximum supported volume size (%s)"
            % (format_bytes(required), format_bytes(sc.MAXIMUM_VOLUME_SIZE)))

    if required_set:
        return required

    return sc.DEFAULT_VOLUME_SIZE


def round_up_size(size, allocation_unit):
    """
    Return the number of allocation units needed to hold size bytes.
    """
    return (size + allocation_unit - 1) // allocation_unit


def round_up_min_size():
    return round_up_size(sc.MINIMUM_VOLUME_SIZE, GiB)
