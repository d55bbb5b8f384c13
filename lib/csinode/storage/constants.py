# SPDX-FileCopyrightText: Red Hat, Inc.
# SPDX-License-Identifier: GPL-2.0-or-later

from csinode.common.units import GiB, TiB

# Smallest and largest block volume we can provision.
MINIMUM_VOLUME_SIZE = 50 * GiB
MAXIMUM_VOLUME_SIZE = 32 * TiB

# Used when the request does not specify a usable size.
DEFAULT_VOLUME_SIZE = MINIMUM_VOLUME_SIZE

# Block volume performance units per GB.
VPUS_PER_GB = "vpusPerGB"
LOW_COST_PERFORMANCE_OPTION = 0
BALANCED_PERFORMANCE_OPTION = 10
HIGHER_PERFORMANCE_OPTION = 20
MAX_ULTRA_HIGH_PERFORMANCE_OPTION = 120

# iSCSI attachment attributes in the publish context.
ISCSI_IQN = "iqn"
ISCSI_IP = "ipv4"
ISCSI_PORT = "port"

# For raw block volumes, the name of the bind mounted file inside the staging
# target path.
RAW_BLOCK_STAGING_FILE = "mountfile"

DEFAULT_FS_TYPE = "ext4"
SUPPORTED_FS_TYPES = ("ext4", "ext3", "xfs")
