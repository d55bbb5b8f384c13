# SPDX-FileCopyrightText: Red Hat, Inc.
# SPDX-License-Identifier: GPL-2.0-or-later

import pytest

from csinode.common.units import KiB, MiB, GiB, TiB, format_bytes


@pytest.mark.parametrize("size,expected", [
    (0, "0"),
    (1, "1"),
    (1023, "1023"),
    (KiB, "1Ki"),
    (KiB + 512, "1.5Ki"),
    (MiB, "1Mi"),
    (50 * GiB, "50Gi"),
    (1023 * GiB, "1023Gi"),
    (TiB, "1Ti"),
    (3 * TiB // 2, "1.5Ti"),
    (32 * TiB, "32Ti"),
    (100 * TiB, "100Ti"),
])
def test_format_bytes(size, expected):
    assert format_bytes(size) == expected
