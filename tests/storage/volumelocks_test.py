# SPDX-FileCopyrightText: Red Hat, Inc.
# SPDX-License-Identifier: GPL-2.0-or-later

import threading

from concurrent.futures import ThreadPoolExecutor

import pytest

from csinode.common import exception
from csinode.storage.volumelocks import VolumeLocks


class InjectedFailure(Exception):
    pass


@pytest.fixture
def locks():
    return VolumeLocks()


def test_empty(locks):
    assert len(locks) == 0
    assert locks.held() == frozenset()


def test_acquire_twice(locks):
    assert locks.try_acquire("vol-1")
    assert not locks.try_acquire("vol-1")
    assert "vol-1" in locks


def test_acquire_after_release(locks):
    assert locks.try_acquire("vol-1")
    locks.release("vol-1")
    assert "vol-1" not in locks
    assert locks.try_acquire("vol-1")


def test_independent_volumes(locks):
    assert locks.try_acquire("vol-1")
    assert locks.try_acquire("vol-2")
    assert locks.held() == frozenset(["vol-1", "vol-2"])
    locks.release("vol-1")
    assert locks.held() == frozenset(["vol-2"])


def test_release_not_held(locks):
    locks.release("vol-1")
    assert len(locks) == 0


def test_release_twice(locks):
    assert locks.try_acquire("vol-1")
    locks.release("vol-1")
    locks.release("vol-1")
    assert len(locks) == 0


def test_instances_are_independent():
    bv = VolumeLocks()
    fss = VolumeLocks()
    assert bv.try_acquire("vol-1")
    assert fss.try_acquire("vol-1")


def test_operation(locks):
    with locks.operation("vol-1"):
        assert "vol-1" in locks
    assert "vol-1" not in locks


def test_operation_in_progress(locks):
    with locks.operation("vol-1"):
        with pytest.raises(exception.VolumeOperationInProgress) as e:
            with locks.operation("vol-1"):
                pass
        assert e.value.code == exception.ABORTED
        assert e.value.context == {"volume_id": "vol-1"}
        # The failed attempt must not release the volume.
        assert "vol-1" in locks
    assert "vol-1" not in locks


def test_operation_releases_on_error(locks):
    with pytest.raises(InjectedFailure):
        with locks.operation("vol-1"):
            raise InjectedFailure
    assert "vol-1" not in locks


def test_concurrent_acquire_single_winner(locks):
    workers = 32
    barrier = threading.Barrier(workers)

    def acquire(_):
        barrier.wait(timeout=10)
        return locks.try_acquire("vol-1")

    with ThreadPoolExecutor(max_workers=workers) as executor:
        results = list(executor.map(acquire, range(workers)))

    assert results.count(True) == 1
    assert locks.held() == frozenset(["vol-1"])


def test_concurrent_acquire_release(locks):
    workers = 8
    rounds = 1000
    inside = {}
    errors = []

    def run(n):
        volume_id = "vol-%d" % (n % 2)
        for _ in range(rounds):
            if not locks.try_acquire(volume_id):
                continue
            try:
                if inside.get(volume_id):
                    errors.append(volume_id)
                inside[volume_id] = True
                inside[volume_id] = False
            finally:
                locks.release(volume_id)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        list(executor.map(run, range(workers)))

    assert errors == []
    assert len(locks) == 0
