"""Discovery of the kubeconfig files to read from and write to.

The rules follow kubectl: an explicit path wins, then the entries of
``$KUBECONFIG``, then ``$HOME/.kube/config``.
"""

from __future__ import annotations

import os
import posixpath
import stat
import sys
from collections.abc import Callable, Iterable

__all__ = [
    "paths",
    "path_for_merge",
    "file_exists",
    "discard_empty_and_duplicates",
    "home_dir",
]

_KUBECONFIG_ENV = "KUBECONFIG"

GetEnv = Callable[[str], str]


def _environ_get(key: str) -> str:
    return os.environ.get(key, "")


def _current_os() -> str:
    return "windows" if sys.platform == "win32" else sys.platform


def _split_list(value: str) -> list[str]:
    if not value:
        return []
    return value.split(os.pathsep)


def paths(explicit_path: str | os.PathLike = "", get_env: GetEnv | None = None) -> list[str]:
    """Return the kubeconfig paths to consider, in order of precedence."""
    get_env = get_env or _environ_get
    if explicit_path:
        return [os.fspath(explicit_path)]

    from_env = discard_empty_and_duplicates(_split_list(get_env(_KUBECONFIG_ENV)))
    if from_env:
        return from_env

    home = home_dir(_current_os(), get_env)
    return [posixpath.normpath(posixpath.join(home, ".kube", "config"))]


def path_for_merge(explicit_path: str | os.PathLike = "", get_env: GetEnv | None = None) -> str:
    """Return the file kubectl would merge new entries into."""
    candidates = paths(explicit_path, get_env)
    if len(candidates) == 1:
        return candidates[0]
    return next((p for p in candidates if file_exists(p)), candidates[-1])


def file_exists(filename: str | os.PathLike) -> bool:
    """Return True if filename exists and is not a directory."""
    try:
        info = os.stat(filename)
    except OSError:
        return False
    return not stat.S_ISDIR(info.st_mode)


def discard_empty_and_duplicates(paths: Iterable[str]) -> list[str]:
    """Drop empty entries and repeats, keeping the first occurrence of each."""
    return list(dict.fromkeys(p for p in paths if p))


def home_dir(goos: str, get_env: GetEnv | None = None) -> str:
    """Return the current user's home directory as kubectl resolves it.

    On Windows the first of HOME, HOMEDRIVE+HOMEPATH and USERPROFILE that
    holds a ``.kube/config`` wins; failing that the first of HOME, USERPROFILE,
    HOMEDRIVE+HOMEPATH that is a writeable directory, then the first that
    exists, then the first that is set. Elsewhere it is simply HOME.
    """
    get_env = get_env or _environ_get
    if goos != "windows":
        return get_env("HOME")

    home = get_env("HOME")
    home_drive, home_path = get_env("HOMEDRIVE"), get_env("HOMEPATH")
    drive_home_path = home_drive + home_path if home_drive and home_path else ""
    user_profile = get_env("USERPROFILE")

    for candidate in (home, drive_home_path, user_profile):
        if candidate and os.path.exists(os.path.join(candidate, ".kube", "config")):
            return candidate

    first_set = ""
    first_existing = ""
    for candidate in (home, user_profile, drive_home_path):
        if not candidate:
            continue
        first_set = first_set or candidate
        try:
            info = os.stat(candidate)
        except OSError:
            continue
        first_existing = first_existing or candidate
        if stat.S_ISDIR(info.st_mode) and stat.S_IMODE(info.st_mode) & stat.S_IWUSR:
            return candidate

    return first_existing or first_set