# SPDX-FileCopyrightText: Red Hat, Inc.
# SPDX-License-Identifier: GPL-2.0-or-later

import logging

import pytest

from csinode.storage import fsutils


@pytest.mark.parametrize("fs_type", ["ext4", "ext3", "xfs"])
def test_supported_fs_type(fs_type):
    assert fsutils.validate_fs_type(fs_type) == fs_type


def test_default_fs_type(caplog):
    with caplog.at_level(logging.WARNING, logger="csinode"):
        assert fsutils.validate_fs_type("") == "ext4"
    assert caplog.records == []


@pytest.mark.parametrize("fs_type", ["btrfs", "EXT4", "ntfs"])
def test_unsupported_fs_type(caplog, fs_type):
    with caplog.at_level(logging.WARNING, logger="csinode"):
        assert fsutils.validate_fs_type(fs_type) == "ext4"
    assert fs_type in caplog.text


def test_path_for_block():
    path = "/var/lib/kubelet/plugins/kubernetes.io/csi/pv/pvc-1/globalmount"
    assert fsutils.get_path_for_block(path) == path + "/mountfile"
