# SPDX-FileCopyrightText: Red Hat, Inc.
# SPDX-License-Identifier: GPL-2.0-or-later

"""
Constants for file/disk sizes.
"""

KiB = 1024
MiB = 1024**2
GiB = 1024**3
TiB = 1024**4
PiB = 1024**5

_SUFFIXES = (
    (TiB, "Ti"),
    (GiB, "Gi"),
    (MiB, "Mi"),
    (KiB, "Ki"),
)


def format_bytes(size):
    """
    Format size in bytes using the largest binary suffix not bigger than
    size, with at most one decimal digit, the way Kubernetes quantities are
    usually displayed::

        format_bytes(50 * GiB)  -> "50Gi"
        format_bytes(3 * TiB // 2) -> "1.5Ti"
        format_bytes(0) -> "0"
    """
    if size == 0:
        return "0"

    for unit, suffix in _SUFFIXES:
        if size >= unit:
            value = "%.1f" % (size / unit)
            break
    else:
        value, suffix = "%.1f" % size, ""

    if value.endswith(".0"):
        value = value[:-2]
    return value + suffix
