import os

import pytest

from kindconfig.kubeconfig_types import KubeconfigError
from kindconfig.lock import lock_file, lock_name, locked, unlock_file


def test_lock_name_appends_suffix():
    assert lock_name("foo") == "foo.lock"


def test_lock_and_unlock(tmp_path):
    target = tmp_path / "config"
    lock_file(target)
    assert sorted(os.listdir(tmp_path)) == ["config.lock"]
    with pytest.raises(FileExistsError):
        lock_file(target)
    unlock_file(target)
    assert os.listdir(tmp_path) == []
    with pytest.raises(FileNotFoundError):
        unlock_file(target)


def test_lock_twice_fails(tmp_path):
    target = tmp_path / "config"
    lock_file(target)
    with pytest.raises(FileExistsError):
        lock_file(target)
    unlock_file(target)
    assert not os.path.exists(lock_name(target))


def test_lock_creates_missing_directory(tmp_path):
    target = tmp_path / "a" / "b" / "config"
    lock_file(target)
    assert os.listdir(tmp_path / "a" / "b") == ["config.lock"]
    with pytest.raises(FileExistsError):
        lock_file(target)


def test_unlock_without_lock_fails(tmp_path):
    with pytest.raises(FileNotFoundError):
        unlock_file(tmp_path / "config")


def test_locked_releases_after_block(tmp_path):
    target = tmp_path / "config"
    with locked(target):
        with pytest.raises(FileExistsError):
            lock_file(target)
    assert os.listdir(tmp_path) == []
    with pytest.raises(FileNotFoundError):
        unlock_file(target)


def test_locked_releases_on_error(tmp_path):
    target = tmp_path / "config"
    with pytest.raises(RuntimeError, match="boom"):
        with locked(target):
            raise RuntimeError("boom")
    assert os.listdir(tmp_path) == []
    with pytest.raises(FileNotFoundError):
        unlock_file(target)


def test_locked_when_already_held(tmp_path):
    target = tmp_path / "config"
    lock_file(target)
    with pytest.raises(KubeconfigError):
        with locked(target):
            pass
    assert os.path.exists(lock_name(target))