# SPDX-FileCopyrightText: Red Hat, Inc.
# SPDX-License-Identifier: GPL-2.0-or-later

"""
driver - node driver instances

A node runs up to three independent node drivers: block volume (BV), file
storage (FSS) and Lustre. Each driver serves its own endpoint and owns its own
VolumeLocks, since volume ids of different drivers are unrelated.
"""

import logging
import os

from csinode.common import config as cfg
from csinode.common import logutils
from csinode.common.logutils import SimpleLogAdapter
from csinode.storage.volumelocks import VolumeLocks

BLOCK_VOLUME_DRIVER_NAME = "blockvolume.csi.oraclecloud.com"
FSS_DRIVER_NAME = "fss.csi.oraclecloud.com"
LUSTRE_DRIVER_NAME = "lustre.csi.oraclecloud.com"

LUSTRE_DRIVER_ENABLED = "LUSTRE_DRIVER_ENABLED"


class NodeDriver(object):

    def __init__(self, name, driver_name, endpoint, node_id):
        self.name = name
        self.driver_name = driver_name
        self.endpoint = endpoint
        self.node_id = node_id
        self.locks = VolumeLocks()
        self.log = SimpleLogAdapter(
            logging.getLogger("csinode.driver"),
            {"driver": name, "node": node_id})

    def __repr__(self):
        return "<NodeDriver name=%s driver=%s endpoint=%s at 0x%x>" % (
            self.name, self.driver_name, self.endpoint, id(self))


def is_lustre_driver_enabled():
    # Only the literal "true" enables the driver, unlike other feature flags.
    return os.environ.get(LUSTRE_DRIVER_ENABLED, "").lower() == "true"


def node_drivers(config=None):
    """
    Create the node drivers enabled by config and the environment.
    """
    if config is None:
        config = cfg.config

    node_id = config.get("vars", "node_id")
    drivers = [
        NodeDriver("BV", BLOCK_VOLUME_DRIVER_NAME,
                   config.get("drivers", "bv_endpoint"), node_id),
    ]

    if config.getboolean("drivers", "fss_enabled"):
        drivers.append(
            NodeDriver("FSS", FSS_DRIVER_NAME,
                       config.get("drivers", "fss_endpoint"), node_id))

    if is_lustre_driver_enabled():
        drivers.append(
            NodeDriver("Lustre", LUSTRE_DRIVER_NAME,
                       config.get("drivers", "lustre_endpoint"), node_id))

    for driver in drivers:
        driver.log.info("Created node driver for endpoint %s", driver.endpoint)

    return drivers


def setup(config=None, stream=None):
    """
    Configure logging at the [vars] log_level of config and create the node
    drivers.
    """
    if config is None:
        config = cfg.config

    logutils.configure(config.get("vars", "log_level"), stream=stream)
    return node_drivers(config)
