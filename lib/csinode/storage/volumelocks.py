# SPDX-FileCopyrightText: Red Hat, Inc.
# SPDX-License-Identifier: GPL-2.0-or-later

import logging
import threading

from contextlib import contextmanager

from csinode.common import exception

log = logging.getLogger("csinode.storage.volumelocks")


class VolumeLocks(object):
    """
    Track volumes with an operation in progress.

    Stage, unstage, publish, unpublish and expand of the same volume must not
    run concurrently. An RPC handler takes the volume before touching the
    device or mount state, and releases it when done::

        if not locks.try_acquire(volume_id):
            return conflict error

        try:
            do the operation..
        finally:
            locks.release(volume_id)

    Or, using the operation context manager::

        with locks.operation(volume_id):
            do the operation..

    Acquiring never blocks: if the volume is taken the caller must fail the
    request or retry later. Acquiring a volume the caller already holds fails
    in the same way, so callers must not nest operations on the same volume.

    Each node driver owns its own instance, since volume ids of different
    drivers are unrelated.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._volumes = set()

    def try_acquire(self, volume_id):
        """
        Mark volume_id as held. Return True if it was not held, False
        otherwise.
        """
        with self._lock:
            if volume_id in self._volumes:
                return False
            self._volumes.add(volume_id)
            return True

    def release(self, volume_id):
        """
        Release volume_id. Releasing a volume which is not held does nothing.
        """
        with self._lock:
            self._volumes.discard(volume_id)

    @contextmanager
    def operation(self, volume_id):
        """
        Hold volume_id during the context.

        Raises exception.VolumeOperationInProgress if the volume is held.
        """
        if not self.try_acquire(volume_id):
            log.warning("Operation for volume %s is already in progress",
                        volume_id)
            raise exception.VolumeOperationInProgress(volume_id=volume_id)
        try:
            yield
        finally:
            self.release(volume_id)

    def held(self):
        with self._lock:
            return frozenset(self._volumes)

    def __contains__(self, volume_id):
        with self._lock:
            return volume_id in self._volumes

    def __len__(self):
        with self._lock:
            return len(self._volumes)

    def __repr__(self):
        return "<VolumeLocks held=%d at 0x%x>" % (len(self), id(self))
