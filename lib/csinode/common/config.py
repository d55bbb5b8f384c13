# SPDX-FileCopyrightText: Red Hat, Inc.
# SPDX-License-Identifier: GPL-2.0-or-later

import configparser
import logging
import os

CONF_FILE = "/etc/csinode/csinode.conf"

log = logging.getLogger("csinode.config")

parameters = [
    # Section: [vars]
    ('vars', [

        ('log_level', 'info',
            'Log level, one of debug, info, warn, error, dpanic, panic, '
            'fatal.'),

        ('node_id', '',
            'Name of the Kubernetes node this driver runs on.'),
    ]),

    # Section: [drivers]
    ('drivers', [

        ('bv_endpoint', 'unix://tmp/csi.sock',
            'Block volume CSI endpoint.'),

        ('fss_endpoint', 'unix://tmp/fss/csi.sock',
            'File storage CSI endpoint.'),

        ('fss_enabled', 'true',
            'Run the file storage node driver.'),

        ('lustre_endpoint', 'unix:///lustre/csi.sock',
            'Lustre CSI endpoint.'),
    ]),
]

# Values accepted by Go strconv.ParseBool, used by the driver deployment
# manifests for feature flags.
_TRUE_VALUES = frozenset(("1", "t", "T", "TRUE", "true", "True"))
_FALSE_VALUES = frozenset(("0", "f", "F", "FALSE", "false", "False"))


def set_defaults(config):
    for section, keylist in parameters:
        config.add_section(section)
        for key, value, comment in keylist:
            config.set(section, key, value)


def load_config(paths=(CONF_FILE,)):
    cfg = configparser.ConfigParser()
    set_defaults(cfg)
    cfg.read(paths)
    return cfg


def make_config(tunables):
    """
    Create a config clone, modified by tunables.
    tunables is a list of (section, key, val) tuples.
    """
    cfg = configparser.ConfigParser()
    set_defaults(cfg)
    for section, key, value in tunables:
        cfg.set(section, key, value)
    return cfg


def parse_bool(value):
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError("invalid boolean value: %r" % value)


def is_feature_enabled(name, default):
    """
    Return the boolean value of environment variable name, or default if the
    variable is unset or cannot be parsed.
    """
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return parse_bool(value)
    except ValueError as e:
        log.error("Failed to parse %s envvar, defaulting to %s: %s",
                  name, default, e)
        return default


config = load_config()
