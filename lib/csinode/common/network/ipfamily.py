# SPDX-FileCopyrightText: Red Hat, Inc.
# SPDX-License-Identifier: GPL-2.0-or-later

"""
ipfamily - IP family posture of subnets and nodes

Subnets and node labels are fetched by the caller. The functions here only
decide on already resolved data.
"""

import logging

from collections import namedtuple

IPV4_STACK = "IPv4"
IPV6_STACK = "IPv6"

LABEL_IP_FAMILY_PREFERRED = "oci.oraclecloud.com/ip-family-preferred"
LABEL_IP_FAMILY_IPV4 = "oci.oraclecloud.com/ip-family-ipv4"
LABEL_IP_FAMILY_IPV6 = "oci.oraclecloud.com/ip-family-ipv6"

log = logging.getLogger("csinode.network")


class Subnet(namedtuple("Subnet", "cidr_block, ipv6_cidr_block, "
                                  "ipv6_cidr_blocks")):
    """
    The address ranges of a cloud subnet. Any field may be missing.
    """
    __slots__ = ()

    def __new__(cls, cidr_block=None, ipv6_cidr_block=None,
                ipv6_cidr_blocks=()):
        return super(Subnet, cls).__new__(
            cls, cidr_block, ipv6_cidr_block, tuple(ipv6_cidr_blocks or ()))

    @classmethod
    def from_dict(cls, d):
        """
        Build a subnet from a networking API subnet mapping, for example::

            {"cidrBlock": "10.0.0.0/24",
             "ipv6CidrBlocks": ["2603:c020:4015:2100::/64"]}
        """
        blocks = d.get("ipv6CidrBlocks") or ()
        if isinstance(blocks, str):
            blocks = (blocks,)
        return cls(cidr_block=d.get("cidrBlock"),
                   ipv6_cidr_block=d.get("ipv6CidrBlock"),
                   ipv6_cidr_blocks=blocks)


class NodeIpFamily(namedtuple("NodeIpFamily",
                              "preferred, ipv4_enabled, ipv6_enabled")):
    __slots__ = ()

    def is_ipv6_single_stack(self):
        return self.ipv6_enabled and not self.ipv4_enabled


def _has_primary_cidr(subnet):
    return bool(subnet.cidr_block) and "null" not in subnet.cidr_block


def is_dual_stack_subnet(subnet):
    return _has_primary_cidr(subnet) and (
        bool(subnet.ipv6_cidr_block) or len(subnet.ipv6_cidr_blocks) > 0)


def is_ipv4_single_stack_subnet(subnet):
    return not is_dual_stack_subnet(subnet) and _has_primary_cidr(subnet)


def is_ipv6_single_stack_subnet(subnet):
    return (not is_dual_stack_subnet(subnet) and
            not is_ipv4_single_stack_subnet(subnet))


def format_ip_stack(value):
    """
    Return IPV4_STACK or IPV6_STACK if value names one of them ignoring case,
    otherwise value unchanged.
    """
    if value.lower() == IPV4_STACK.lower():
        return IPV4_STACK
    elif value.lower() == IPV6_STACK.lower():
        return IPV6_STACK
    return value


def is_valid_ip_family_present_in_cluster_ip_family(cluster_ip_family):
    return bool(cluster_ip_family) and (
        IPV4_STACK in cluster_ip_family or IPV6_STACK in cluster_ip_family)


def is_ipv6_single_stack_node(family):
    if family is None:
        return False
    return family.is_ipv6_single_stack()


def node_ip_family(labels):
    """
    Resolve the IP family of a node from its labels.

    A family is enabled only if its label is "true" (ignoring case). If no
    family is enabled the node is treated as IPv4 preferred, IPv4 enabled.
    """
    labels = labels or {}
    preferred = format_ip_stack(labels.get(LABEL_IP_FAMILY_PREFERRED, ""))
    ipv4_enabled = labels.get(LABEL_IP_FAMILY_IPV4, "").lower() == "true"
    ipv6_enabled = labels.get(LABEL_IP_FAMILY_IPV6, "").lower() == "true"

    if not ipv4_enabled and not ipv6_enabled:
        family = NodeIpFamily(IPV4_STACK, True, False)
        log.info("No IP family labels identified on node, defaulting to "
                 "ipv4: %s", family)
    else:
        family = NodeIpFamily(preferred, ipv4_enabled, ipv6_enabled)
        log.info("Node IP family identified: %s", family)

    return family
