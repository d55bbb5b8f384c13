# SPDX-FileCopyrightText: Red Hat, Inc.
# SPDX-License-Identifier: GPL-2.0-or-later

"""
iSCSI attachment details of block volumes.
"""

import logging
import re

from collections import namedtuple

from csinode.common import exception
from csinode.common.network import address
from csinode.storage import constants as sc

# Paravirtualized attachment, e.g.
# /dev/disk/by-path/pci-0000:00:04.0-scsi-0:0:0:1
DISK_BY_PATH_PV = re.compile(
    r"/dev/disk/by-path/pci-\w{4}:\w{2}:\w{2}\.\d+-scsi-\d+:\d+:\d+:\d+$")

# iSCSI attachment, e.g.
# /dev/disk/by-path/ip-169.254.2.2:3260-iscsi-iqn.2015-12.com.oracleiaas:uuid-lun-1
# /dev/disk/by-path/ip-[fd00:c1::a9fe:202]:3260-iscsi-iqn.2015-12.com.oracleiaas:uuid-lun-1
DISK_BY_PATH_ISCSI = re.compile(
    r"/dev/disk/by-path/ip-(?:\[(?P<ip6>[\w.:]+)\]|(?P<ip>[\w.]+))"
    r":(?P<port>\d+)"
    r"-iscsi-(?P<iqn>[\w.\-:]+)-lun-\d+$")

log = logging.getLogger("csinode.storage.iscsi")


class Disk(namedtuple("Disk", "iqn, iscsi_ip, port")):
    """
    An iSCSI target disk.
    """
    __slots__ = ()

    @property
    def portal(self):
        return address.hosttail_join(self.iscsi_ip, str(self.port))

    def is_ipv6(self):
        return address.is_ipv6(self.iscsi_ip)

    def with_ipv6(self):
        """
        Return a copy of this disk addressing the target through its
        synthesized IPv6 address, for IPv6 single stack nodes.
        """
        if self.is_ipv6():
            return self
        return self._replace(
            iscsi_ip=address.convert_iscsi_ipv4_to_ipv6(self.iscsi_ip))

    def __str__(self):
        return "%s %s" % (self.portal, self.iqn)


_DECIMAL = re.compile(r"[+-]?[0-9]+\Z")


def _parse_int(value):
    # int() also accepts whitespace and underscores, attributes may not.
    if not isinstance(value, str) or not _DECIMAL.match(value):
        raise ValueError("invalid integer: %r" % (value,))
    return int(value)


def _parse_port(port):
    try:
        return _parse_int(port)
    except ValueError:
        raise exception.InvalidAttribute("invalid port number", port=port)


def extract_iscsi_information(attributes):
    """
    Return the Disk described by the publish context attributes.

    Raises exception.AttributeNotFound if a required attribute is missing, and
    exception.InvalidAttribute if the port is not a number.
    """
    for key in (sc.ISCSI_IQN, sc.ISCSI_IP, sc.ISCSI_PORT):
        if key not in attributes:
            raise exception.AttributeNotFound(
                "unable to get the %s from the attribute list" % key,
                attribute=key)

    return Disk(
        iqn=attributes[sc.ISCSI_IQN],
        iscsi_ip=attributes[sc.ISCSI_IP],
        port=_parse_port(attributes[sc.ISCSI_PORT]))


def extract_iscsi_information_from_mount_path(disk_paths):
    """
    Return the Disk of the first iSCSI by-path device in disk_paths.

    Raises exception.AttributeNotFound if no path is an iSCSI device path.
    """
    log.info("Getting iSCSI info for the mount path: %s", disk_paths)
    for path in disk_paths:
        m = DISK_BY_PATH_ISCSI.search(path)
        if m:
            disk = Disk(iqn=m.group("iqn"),
                        iscsi_ip=m.group("ip6") or m.group("ip"),
                        port=int(m.group("port")))
            log.info("Found iSCSI info %s for the mount path: %s",
                     disk, disk_paths)
            return disk

    log.error("Invalid mount path: %s", disk_paths)
    raise exception.AttributeNotFound(
        "iSCSI information not found for mount path", paths=disk_paths)


def is_paravirtualized(disk_path):
    return DISK_BY_PATH_PV.search(disk_path) is not None


def extract_block_volume_performance_level(value):
    """
    Return the performance level (VPUs per GB) in value.

    Raises exception.InvalidAttribute if value is not an integer, and
    exception.InvalidPerformanceLevel if it is out of the supported range.
    """
    try:
        vpus_per_gb = _parse_int(value)
    except ValueError:
        raise exception.InvalidAttribute(
            "unable to parse performance level value as integer",
            value=value)

    if not (sc.LOW_COST_PERFORMANCE_OPTION <= vpus_per_gb <=
            sc.MAX_ULTRA_HIGH_PERFORMANCE_OPTION):
        raise exception.InvalidPerformanceLevel(
            "supported values for performance options are between %d and %d"
            % (sc.LOW_COST_PERFORMANCE_OPTION,
               sc.MAX_ULTRA_HIGH_PERFORMANCE_OPTION),
            value=value)

    return vpus_per_gb
