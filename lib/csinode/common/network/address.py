# SPDX-FileCopyrightText: Red Hat, Inc.
# SPDX-License-Identifier: GPL-2.0-or-later

"""
address - IP address literal helpers

All bracket handling for IPv6 literals lives here. Other modules must not
count colons or strip brackets themselves.
"""

import ipaddress

from csinode.common import exception

# Block volume attachments on IPv6 single stack nodes reach the iSCSI target
# through this /96 prefix. The low 32 bits carry the IPv4 target address.
ISCSI_IPV6_PREFIX = "fd00:00c1::"

_ISCSI_IPV6_NETWORK = ipaddress.IPv6Network(ISCSI_IPV6_PREFIX + "/96")


def _parse(addr):
    # Zone identifiers ("fe80::1%eth0") are not valid address literals here.
    if "%" in addr:
        return None
    try:
        return ipaddress.ip_address(addr)
    except ValueError:
        return None


def _ipv4(addr):
    """
    Return the IPv4Address for addr, or None. IPv4 mapped IPv6 addresses
    (::ffff:a.b.c.d) have a valid 4 byte form and count as IPv4.
    """
    ip = _parse(addr)
    if ip is None:
        return None
    if ip.version == 4:
        return ip
    return ip.ipv4_mapped


def strip_brackets(addr):
    return addr.strip("[]")


def is_ip(addr):
    """
    Return True if addr, with enclosing brackets removed, is an IP literal.
    """
    return _parse(strip_brackets(addr)) is not None


def is_ipv4(addr):
    return _ipv4(addr) is not None


def is_ipv6(addr):
    """
    Return True if addr is not an IPv4 literal but parses as an address once
    enclosing brackets are removed. A bracketed IPv4 address ("[10.0.0.5]")
    is not an IPv4 literal, so it counts as IPv6.
    """
    if is_ipv4(addr):
        return False
    return _parse(strip_brackets(addr)) is not None


def format_valid_ip(addr):
    """
    Return addr in a form that can be embedded in a colon delimited string:
    IPv6 literals are wrapped in brackets, anything else is returned as is.
    """
    if is_ipv4(addr):
        return addr
    ip = _parse(addr)
    if ip is not None and ip.version == 6:
        return "[%s]" % addr
    return addr


def hosttail_join(host, tail):
    """
    Given a host and a tail, this method returns:
    - "[host]:tail" if the host contains at least one colon,
                    for example when the host is an IPv6 address.
    - "host:tail"   otherwise

    The tail part may be a port or a path.
    """
    if ':' in host:
        host = '[' + host + ']'
    return host + ':' + tail


def convert_iscsi_ipv4_to_ipv6(ipv4):
    """
    Synthesize the IPv6 address of an IPv4 iSCSI target by placing the IPv4
    address in the low 32 bits of ISCSI_IPV6_PREFIX.

    Example:
        convert_iscsi_ipv4_to_ipv6("203.0.113.5") -> "fd00:c1::cb00:7105"

    Raises exception.AddressFamilyError if ipv4 is not an IPv4 address.
    """
    ip = _ipv4(ipv4)
    if ip is None:
        raise exception.AddressFamilyError(
            "invalid iSCSI IP identified", address=ipv4)
    packed = _ISCSI_IPV6_NETWORK.network_address.packed[:12] + ip.packed
    return str(ipaddress.IPv6Address(packed))


def convert_iscsi_ipv6_to_ipv4(ipv6):
    """
    Reverse convert_iscsi_ipv4_to_ipv6.

    Raises exception.AddressFamilyError if ipv6 is not an IPv6 address under
    ISCSI_IPV6_PREFIX.
    """
    ip = _parse(strip_brackets(ipv6))
    if ip is None or ip.version != 6 or ip not in _ISCSI_IPV6_NETWORK:
        raise exception.AddressFamilyError(
            "address is not a synthesized iSCSI IPv6 address",
            address=ipv6, prefix=ISCSI_IPV6_PREFIX)
    return str(ipaddress.IPv4Address(ip.packed[12:]))
