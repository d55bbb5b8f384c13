# SPDX-FileCopyrightText: Red Hat, Inc.
# SPDX-License-Identifier: GPL-2.0-or-later

import logging
import os

from csinode.storage import constants as sc

log = logging.getLogger("csinode.storage.fsutils")


def validate_fs_type(fs_type):
    """
    Return the filesystem type to format a volume with. Unsupported types are
    replaced by the default type.
    """
    if fs_type in sc.SUPPORTED_FS_TYPES:
        return fs_type
    if fs_type:
        log.warning("Unsupported fsType %r, supporting only %s, using %s",
                    fs_type, "/".join(sc.SUPPORTED_FS_TYPES),
                    sc.DEFAULT_FS_TYPE)
    return sc.DEFAULT_FS_TYPE


def get_path_for_block(volume_path):
    """
    Return the file inside the staging path a raw block volume is bind
    mounted on.
    """
    return os.path.join(volume_path, sc.RAW_BLOCK_STAGING_FILE)
