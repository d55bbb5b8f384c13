# SPDX-FileCopyrightText: Red Hat, Inc.
# SPDX-License-Identifier: GPL-2.0-or-later

"""
fss - file storage volume handles

A file storage volume handle has the form::

    <filesystem id>:<mount target address>:<export path>

The mount target address may be an IPv6 address, bracketed or not, so the
handle is split on the first and last colons.
"""

import logging
import re

from collections import namedtuple

from csinode.common.network import address

# Handle parse results, see volume_handle_status().
VALID = "valid"
ABSENT = "absent"
MALFORMED = "malformed"

_DNS_NAME = re.compile(r"^([a-zA-Z0-9]+(-[a-zA-Z0-9]+)*\.)+[a-zA-Z]{2,}$")

log = logging.getLogger("csinode.storage.fss")


class VolumeHandle(namedtuple("VolumeHandle",
                              "filesystem_id, mount_target_address, "
                              "export_path")):
    """
    A parsed file storage volume handle. Either all fields are set, or all
    fields are empty. The mount target address is kept without brackets.
    """
    __slots__ = ()

    def __bool__(self):
        return bool(self.filesystem_id)

    def __str__(self):
        if not self:
            return ""
        return self.filesystem_id + ":" + address.hosttail_join(
            self.mount_target_address, self.export_path)


EMPTY_HANDLE = VolumeHandle("", "", "")


def validate_dns_name(name):
    return _DNS_NAME.fullmatch(name) is not None


def parse_volume_handle(handle):
    """
    Parse a file storage volume handle.

    Returns a VolumeHandle, or EMPTY_HANDLE if handle is empty or malformed.
    Never raises.
    """
    if not handle:
        return EMPTY_HANDLE

    first = handle.find(":")
    last = handle.rfind(":")
    if first <= 0 or last >= len(handle) - 1 or first == last:
        return EMPTY_HANDLE

    candidate = handle[first + 1:last]
    if not (address.is_ip(candidate) or validate_dns_name(candidate)):
        log.debug("Invalid mount target address %r in volume handle %r",
                  candidate, handle)
        return EMPTY_HANDLE

    return VolumeHandle(
        filesystem_id=handle[:first],
        mount_target_address=address.strip_brackets(candidate),
        export_path=handle[last + 1:])


def format_volume_handle(volume_handle):
    return str(volume_handle)


def volume_handle_status(handle):
    """
    Return VALID, ABSENT or MALFORMED for handle, for callers that need to
    tell a missing handle from a bad one.
    """
    if not handle:
        return ABSENT
    if parse_volume_handle(handle):
        return VALID
    return MALFORMED
