# SPDX-FileCopyrightText: Red Hat, Inc.
# SPDX-License-Identifier: GPL-2.0-or-later

import logging

from csinode.common import exception

LABEL_TOPOLOGY_ZONE = "topology.kubernetes.io/zone"
# Deprecated, still set on older nodes.
LABEL_ZONE_FAILURE_DOMAIN = "failure-domain.beta.kubernetes.io/zone"
LABEL_FULL_AVAILABILITY_DOMAIN = "csi-ipv6-full-ad-name"

log = logging.getLogger("csinode.topology")


def lookup_node_availability_domain(labels):
    """
    Return the availability domain and the full availability domain name of
    a node from its labels. The full name is empty if the node has no such
    label.

    Raises exception.AttributeNotFound if the node has no zone label.
    """
    labels = labels or {}
    for key in (LABEL_TOPOLOGY_ZONE, LABEL_ZONE_FAILURE_DOMAIN):
        if key in labels:
            return labels[key], labels.get(LABEL_FULL_AVAILABILITY_DOMAIN, "")

    log.error("Did not find the label for the fault domain, checked "
              "topology labels: %s, %s",
              LABEL_TOPOLOGY_ZONE, LABEL_ZONE_FAILURE_DOMAIN)
    raise exception.AttributeNotFound(
        "did not find the label for the fault domain",
        labels=[LABEL_TOPOLOGY_ZONE, LABEL_ZONE_FAILURE_DOMAIN])


def availability_domain_from_label(full_ad):
    """
    Convert a full availability domain name to the name used in node labels:
    "zkJl:US-ASHBURN-AD-1" -> "US-ASHBURN-AD-1"
    """
    ad = full_ad.rsplit(":", 1)[-1]
    log.info("Converted %r to %r", full_ad, ad)
    return ad
